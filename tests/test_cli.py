"""Tests for the console entry points, driven through main() with in-memory streams."""
import io

import networkx as nx
import pytest

from dgontools.cli import brill_noether_geng, convert, find_gonality, subdivision_conjecture
from dgontools.cli.common import format_divisor, parts_per_edge
from dgontools.external import nauty


C4_PLAIN = "C4\n4 4\n0 1\n1 2\n2 3\n3 0\n"
P3_PLAIN = "P3\n3 2\n0 1\n1 2\n"
BANANA_PLAIN = "banana\n2 3\n0 1\n0 1\n0 1\n"


def _run(main, argv, text):
    out = io.StringIO()
    code = main(argv, stdin=io.StringIO(text), stdout=out)
    return code, out.getvalue()


def _nx_g6(H):
    return nx.to_graph6_bytes(H, header=False).decode("ascii").strip()


# --- common ---

def test_format_divisor():
    assert format_divisor([2, 0, 1]) == "[2, 0, 1]"
    assert format_divisor(()) == "[]"


def test_parts_per_edge_range():
    parse = parts_per_edge(2)
    assert parse("3") == 3
    with pytest.raises(Exception):
        parse("1")
    with pytest.raises(Exception):
        parse("many")


# --- dgon-find-gonality ---

def test_find_gonality_plain():
    code, out = _run(find_gonality.main, [], C4_PLAIN + "\n" + P3_PLAIN)
    assert code == 0
    assert out == "C4: 2\nP3: 1\n"


def test_find_gonality_verbose():
    code, out = _run(find_gonality.main, ["-v"], C4_PLAIN)
    assert code == 0
    assert out == "C4: 2\n  Positive rank divisor: [2, 0, 0, 0]\n"


def test_find_gonality_very_verbose():
    code, out = _run(find_gonality.main, ["-vv"], P3_PLAIN)
    assert code == 0
    assert out.splitlines() == [
        "P3: 1",
        "  Positive rank divisor: [1, 0, 0]",
        "    Reduced to vertex 0:  [1, 0, 0]",
        "    Reduced to vertex 1:  [0, 1, 0]",
        "    Reduced to vertex 2:  [0, 0, 1]",
    ]


def test_find_gonality_all():
    code, out = _run(find_gonality.main, ["-a"], C4_PLAIN)
    assert code == 0
    assert out.splitlines() == [
        "C4:",
        "  Positive rank divisor: [2, 0, 0, 0]",
        "  Positive rank divisor: [1, 1, 0, 0]",
        "  Positive rank divisor: [1, 0, 1, 0]",
        "  Positive rank divisor: [1, 0, 0, 1]",
    ]


def test_find_gonality_subdivided():
    code, out = _run(find_gonality.main, ["3"], BANANA_PLAIN)
    assert code == 0
    assert out == "banana: 2\n"


def test_find_gonality_graph6():
    g6 = _nx_g6(nx.complete_graph(4))
    code, out = _run(find_gonality.main, ["-g"], g6 + "\n")
    assert code == 0
    assert out == f"{g6}: 3\n"


def test_find_gonality_bad_input(capsys):
    code, out = _run(find_gonality.main, [], "C4\n4 1\n0 4\n")
    assert code == 1
    assert out == ""
    assert capsys.readouterr().err.startswith("Error: line 3")


def test_find_gonality_disconnected(capsys):
    code, _ = _run(find_gonality.main, [], "two edges\n4 2\n0 1\n2 3\n")
    assert code == 1
    assert "not connected" in capsys.readouterr().err


def test_find_gonality_bad_k():
    with pytest.raises(SystemExit) as excinfo:
        _run(find_gonality.main, ["0"], C4_PLAIN)
    assert excinfo.value.code == 2


# --- dgon-subdivision-conjecture ---

def test_subdivision_quiet_summary():
    code, out = _run(subdivision_conjecture.main, [], C4_PLAIN)
    assert code == 0
    assert out == "\nSummary: found 0 counterexamples.\n"


def test_subdivision_verbose_extended():
    code, out = _run(subdivision_conjecture.main, ["-v"], C4_PLAIN)
    assert code == 0
    assert out.splitlines()[0] == (
        'Graph 1 ("C4"): (original gonality, subdivided gonality, '
        "Brill–Noether bound) = (2, 2, 2)."
    )


def test_subdivision_fast_very_verbose():
    code, out = _run(subdivision_conjecture.main, ["-f", "-vv"], C4_PLAIN + P3_PLAIN)
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == 'Graph 1 ("C4"): all OK. Divisor: [2, 0, 0, 0, 0, 0, 0, 0]'
    assert lines[1] == 'Graph 2 ("P3"): all OK. Divisor: [1, 0, 0, 0, 0]'
    assert lines[-1] == "Summary: found 0 counterexamples."


def test_subdivision_rejects_k_one():
    with pytest.raises(SystemExit):
        _run(subdivision_conjecture.main, ["1"], C4_PLAIN)


# --- converters ---

def test_to_graph6():
    code, out = _run(convert.to_graph6_main, [], C4_PLAIN)
    assert code == 0
    assert out == _nx_g6(nx.cycle_graph(4)) + "\n"


def test_to_graph6_skips_multigraph(capsys):
    code, out = _run(convert.to_graph6_main, [], BANANA_PLAIN + C4_PLAIN)
    assert code == 0
    assert out == _nx_g6(nx.cycle_graph(4)) + "\n"
    assert 'Skipping graph "banana"' in capsys.readouterr().err


def test_to_graph6_subdivided_multigraph_is_simple():
    code, out = _run(convert.to_graph6_main, ["2"], BANANA_PLAIN)
    assert code == 0
    H = nx.from_graph6_bytes(out.strip().encode("ascii"))
    assert H.number_of_nodes() == 5
    assert H.number_of_edges() == 6


def test_from_graph6():
    g6 = _nx_g6(nx.path_graph(3))
    code, out = _run(convert.from_graph6_main, [], g6 + "\n")
    assert code == 0
    assert out == f'Graph 1 ("{g6}")\n3 2\n0 1\n1 2\n'


def test_from_graph6_bad_line(capsys):
    code, _ = _run(convert.from_graph6_main, [], "D\n")
    assert code == 1
    assert capsys.readouterr().err.startswith("Error:")


# --- dgon-brill-noether-geng ---

def test_vertex_count_type():
    assert brill_noether_geng.vertex_count("7") == 7
    with pytest.raises(Exception):
        brill_noether_geng.vertex_count("2")


def test_res_mod_type():
    assert brill_noether_geng.res_mod("2/5") == (2, 5)
    for bad in ("5/5", "1/0", "x/3", "3"):
        with pytest.raises(Exception):
            brill_noether_geng.res_mod(bad)


def test_brill_noether_geng_without_nauty(monkeypatch, capsys):
    monkeypatch.setattr(nauty, "NAUTY_GENG", "/nonexistent/geng")
    code = brill_noether_geng.main(["5", "-j", "1"], stdout=io.StringIO())
    assert code == 1
    assert "nauty not available" in capsys.readouterr().err


@pytest.mark.skipif(not nauty.nauty_available(), reason="nauty geng not available")
def test_brill_noether_geng_small_run():
    out = io.StringIO()
    assert brill_noether_geng.main(["5", "-q", "-j", "2"], stdout=out) == 0
    assert out.getvalue().endswith("found 0 problems.\n")
