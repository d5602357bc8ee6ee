"""Tests for the nauty geng wrapper (generation tests need nauty installed)."""
import pytest

from dgontools.conjectures.brill_noether import brill_noether_geng_options, run_brill_noether
from dgontools.external import nauty
from dgontools.external.nauty import nauty_available, geng_command, geng_g6
from dgontools.io.graph6 import g6_to_graph


def test_geng_command_defaults():
    assert geng_command(5) == [nauty.NAUTY_GENG, "-g", "-q", "5"]


def test_geng_command_full():
    cmd = geng_command(
        7, connected=True, min_degree=2, max_degree=4, min_edges=7, max_edges=12, res=1, mod=3
    )
    assert cmd == [nauty.NAUTY_GENG, "-g", "-q", "-c", "-d2", "-D4", "7", "7:12", "1/3"]


def test_geng_command_biconnected_wins():
    cmd = geng_command(6, connected=True, biconnected=True, quiet=False)
    assert cmd == [nauty.NAUTY_GENG, "-g", "-C", "6"]


def test_geng_command_open_edge_range():
    assert geng_command(4, min_edges=3)[-1] == "3:"
    assert geng_command(4, max_edges=3)[-1] == "0:3"


def test_geng_command_rejects_bad_options():
    with pytest.raises(ValueError):
        geng_command(0)
    with pytest.raises(ValueError):
        geng_command(5, res=1)
    with pytest.raises(ValueError):
        geng_command(5, res=3, mod=3)


def test_geng_missing_raises(monkeypatch):
    monkeypatch.setattr(nauty, "NAUTY_GENG", "/nonexistent/geng")
    assert not nauty_available()
    with pytest.raises(RuntimeError, match="nauty not available"):
        list(geng_g6(4))


@pytest.mark.skipif(not nauty_available(), reason="nauty geng not available")
def test_geng_connected_four_vertices():
    graphs = [g6_to_graph(s) for s in geng_g6(4, connected=True)]
    assert len(graphs) == 6
    assert all(G.n == 4 and G.is_connected() for G in graphs)


@pytest.mark.skipif(not nauty_available(), reason="nauty geng not available")
def test_geng_res_mod_partitions_output():
    everything = set(geng_g6(6, connected=True))
    parts = [set(geng_g6(6, connected=True, res=r, mod=3)) for r in range(3)]
    assert set().union(*parts) == everything
    assert sum(len(p) for p in parts) == len(everything)


@pytest.mark.skipif(not nauty_available(), reason="nauty geng not available")
def test_brill_noether_holds_on_six_vertices():
    options = brill_noether_geng_options(6)
    graphs = list(geng_g6(6, **options))
    for s in graphs:
        G = g6_to_graph(s)
        assert G.is_connected()
        assert min(G.degree(v) for v in range(G.n)) >= 2
        assert 6 <= G.count_edges() <= 9
    summary = run_brill_noether(graphs, processes=2)
    assert summary.tested == len(graphs)
    assert summary.problems == 0
