"""
alpha.py - Transparency flags for SERIKO surface painting.
"""

from __future__ import annotations

from .nodes import PaintTransparentRegionBlack, UseSelfAlpha
from .primitives import Match, first_match, keyed, u8

RULES = (
    keyed("seriko.paint_transparent_region_black,", u8, PaintTransparentRegionBlack),
    keyed("seriko.use_self_alpha,", u8, UseSelfAlpha),
)


def alpha(text: str, pos: int) -> Match:
    return first_match(RULES, text, pos)
