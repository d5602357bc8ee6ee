from .nauty import (
    NAUTY_GENG,
    nauty_available,
    geng_command,
    geng_g6,
)

__all__ = [
    "NAUTY_GENG",
    "nauty_available",
    "geng_command",
    "geng_g6",
]
