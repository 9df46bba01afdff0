"""
binding.py - Dress-up part binding and the per-character bind menu.

Every family here exists for ``sakura``, ``kero`` and ``charN``:

  <scope>.bindgroupN.name,category,part[,thumbnail]
  <scope>.bindgroupN.default,flag
  <scope>.bindgroupN.addid,id[,id...]
  <scope>.bindoptionN.group,category,mustselect|multiple[+...]
  <scope>.menuitemN,id|-
  <scope>.menuitemexN,label,id|-
  <scope>.menu,auto|hidden
"""

from __future__ import annotations

from .nodes import (
    MENU_SEPARATOR,
    BindGroupAddId,
    BindGroupDefault,
    BindGroupName,
    BindMenu,
    BindMenuItem,
    BindOptionGroup,
    MenuItem,
    MenuItemEx,
    MenuVisibility,
)
from .primitives import (
    Match,
    choice,
    field_text,
    first_match,
    keyword,
    literal,
    mapped,
    optional,
    preceded,
    scoped,
    separated1,
    sequence,
    u8,
    u32,
)

_MUSTSELECT = "mustselect"
_MULTIPLE = "multiple"

bind_group_name = sequence(
    preceded(".bindgroup", u32),
    preceded(".name,", field_text),
    preceded(",", field_text),
    optional(preceded(",", field_text)),
)

bind_group_default = sequence(
    preceded(".bindgroup", u32),
    preceded(".default,", u8),
)

bind_group_addid = sequence(
    preceded(".bindgroup", u32),
    preceded(".addid,", separated1(u32, ",")),
)


def _flags(tags: tuple[str, ...]) -> tuple[bool, bool]:
    return _MUSTSELECT in tags, _MULTIPLE in tags


bind_option_flags = mapped(
    separated1(keyword({_MUSTSELECT: _MUSTSELECT, _MULTIPLE: _MULTIPLE}), "+"),
    _flags,
)

bind_option = sequence(
    preceded(".bindoption", u32),
    preceded(".group,", field_text),
    preceded(",", bind_option_flags),
)

bind_menu_item = choice(
    mapped(u32, BindMenuItem),
    literal("-", MENU_SEPARATOR),
)

menuitem = sequence(
    preceded(".menuitem", u32),
    preceded(",", bind_menu_item),
)

menuitemex = sequence(
    preceded(".menuitemex", u32),
    preceded(",", field_text),
    preceded(",", bind_menu_item),
)

menu_visibility = keyword({v.value: v for v in MenuVisibility})

RULES = (
    *scoped("", bind_group_name, lambda s, v: BindGroupName(s, *v)),
    *scoped("", bind_group_default, lambda s, v: BindGroupDefault(s, *v)),
    *scoped("", bind_group_addid, lambda s, v: BindGroupAddId(s, *v)),
    *scoped("", bind_option,
            lambda s, v: BindOptionGroup(s, v[0], v[1], *v[2])),
    *scoped("", menuitem, lambda s, v: MenuItem(s, *v)),
    *scoped("", menuitemex, lambda s, v: MenuItemEx(s, *v)),
    *scoped(".menu,", menu_visibility, BindMenu),
)


def binding(text: str, pos: int) -> Match:
    return first_match(RULES, text, pos)
