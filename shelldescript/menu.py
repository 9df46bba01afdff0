"""
menu.py - Owner-draw menu appearance: font, bitmaps, colours, alignment.

Colour keys follow ``menu.<target>.color.<channel>,<0-255>``; the fifteen
combinations are generated from MenuColorTarget x ColorChannel.

Background/foreground alignment is a base position followed by up to two
``+repeat-x`` / ``+repeat-y`` modifiers; the sidebar takes ``top`` or
``bottom`` with an optional ``+repeat-y``.
"""

from __future__ import annotations

from .nodes import (
    ColorChannel,
    MenuAlignmentBase,
    MenuBackgroundAlignment,
    MenuBackgroundBitmap,
    MenuColor,
    MenuColorTarget,
    MenuFontHeight,
    MenuFontName,
    MenuForegroundAlignment,
    MenuForegroundBitmap,
    MenuRepeat,
    MenuSidebarAlignment,
    MenuSidebarBitmap,
    SidebarBase,
    SidebarRepeat,
)
from .primitives import (
    Match,
    first_match,
    free_text,
    keyed,
    keyword,
    optional,
    sequence,
    u8,
    u32,
)

alignment_base = keyword({b.value: b for b in MenuAlignmentBase})
alignment_repeat = keyword({r.value: r for r in MenuRepeat})
sidebar_base = keyword({b.value: b for b in SidebarBase})
sidebar_repeat = keyword({r.value: r for r in SidebarRepeat})

foreground_background_position = sequence(
    alignment_base, optional(alignment_repeat), optional(alignment_repeat),
)
sidebar_position = sequence(sidebar_base, optional(sidebar_repeat))


def _color_rule(target: MenuColorTarget, channel: ColorChannel):
    return keyed(
        f"menu.{target.value}.color.{channel.value},",
        u8,
        lambda v: MenuColor(target, channel, v),
    )


COLOR_RULES = tuple(
    _color_rule(target, channel)
    for target in MenuColorTarget
    for channel in ColorChannel
)

RULES = (
    keyed("menu.font.name,", free_text, MenuFontName),
    keyed("menu.font.height,", u32, MenuFontHeight),
    keyed("menu.background.bitmap.filename,", free_text, MenuBackgroundBitmap),
    keyed("menu.foreground.bitmap.filename,", free_text, MenuForegroundBitmap),
    keyed("menu.sidebar.bitmap.filename,", free_text, MenuSidebarBitmap),
    *COLOR_RULES,
    keyed("menu.background.alignment,", foreground_background_position,
          lambda v: MenuBackgroundAlignment(*v)),
    keyed("menu.foreground.alignment,", foreground_background_position,
          lambda v: MenuForegroundAlignment(*v)),
    keyed("menu.sidebar.alignment,", sidebar_position,
          lambda v: MenuSidebarAlignment(*v)),
)


def menu(text: str, pos: int) -> Match:
    return first_match(RULES, text, pos)
