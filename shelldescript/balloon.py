"""
balloon.py - Balloon placement relative to each character.
"""

from __future__ import annotations

from .nodes import (
    BalloonAlignment,
    BalloonDontMove,
    BalloonOffsetX,
    BalloonOffsetY,
    BalloonPosition,
)
from .primitives import (
    FIXED_ROLES,
    Match,
    choice,
    first_match,
    i64,
    keyword,
    literal,
    scoped,
    u8,
)

balloon_position = keyword({p.value: p for p in BalloonPosition})

# "true" is an alternate spelling of 1.
dontmove_flag = choice(u8, literal("true", 1))

RULES = (
    *scoped(".balloon.offsetx,", i64, BalloonOffsetX, FIXED_ROLES),
    *scoped(".balloon.offsety,", i64, BalloonOffsetY, FIXED_ROLES),
    *scoped(".balloon.alignment,", balloon_position, BalloonAlignment, FIXED_ROLES),
    *scoped(".balloon.dontmove,", dontmove_flag, BalloonDontMove),
)


def balloon_representation(text: str, pos: int) -> Match:
    return first_match(RULES, text, pos)
