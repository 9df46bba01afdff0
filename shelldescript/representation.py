"""
representation.py - How the shell's surfaces sit on the desktop.

Covers z-order, sticky windows, desktop alignment and the default position
of each entity.  Positions are signed.
"""

from __future__ import annotations

from .nodes import (
    AlignmentToDesktop,
    DefaultLeft,
    DefaultTop,
    DefaultX,
    DefaultY,
    StickyWindow,
    SurfacePosition,
    ZOrder,
)
from .primitives import (
    Match,
    first_match,
    i64,
    keyed,
    keyword,
    scoped,
    separated1,
    u32,
)

scope_ids = separated1(u32, ",")
surface_position = keyword({p.value: p for p in SurfacePosition})

RULES = (
    keyed("seriko.zorder,", scope_ids, ZOrder),
    keyed("seriko.sticky-window,", scope_ids, StickyWindow),
    keyed("seriko.alignmenttodesktop,", surface_position,
          lambda v: AlignmentToDesktop(None, v)),
    *scoped(".seriko.alignmenttodesktop,", surface_position, AlignmentToDesktop),
    *scoped(".defaultx,", i64, DefaultX),
    *scoped(".defaulty,", i64, DefaultY),
    *scoped(".defaultleft,", i64, DefaultLeft),
    *scoped(".defaulttop,", i64, DefaultTop),
)


def shell_representation(text: str, pos: int) -> Match:
    return first_match(RULES, text, pos)
