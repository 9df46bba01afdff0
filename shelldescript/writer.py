"""
writer.py - Render a Document back to descript.txt text, bytes or a dict.

The output is canonical (one directive per line, fixed spelling of every
key) and re-parses to an equal Document.
"""

from __future__ import annotations

from dataclasses import fields
from enum import Enum
from typing import Callable, Optional

from .charset import Charset
from .nodes import (
    AlignmentToDesktop,
    BalloonAlignment,
    BalloonDontMove,
    BalloonOffsetX,
    BalloonOffsetY,
    BindGroupAddId,
    BindGroupDefault,
    BindGroupName,
    BindMenu,
    BindMenuItem,
    BindOptionGroup,
    BlankLine,
    CharacterName,
    CommentLine,
    Craftman,
    CraftmanUrl,
    CraftmanW,
    DefaultLeft,
    DefaultTop,
    DefaultX,
    DefaultY,
    DescriptCharset,
    Directive,
    DirectiveLine,
    Document,
    HomeUrl,
    Id,
    Line,
    MenuBackgroundAlignment,
    MenuBackgroundBitmap,
    MenuColor,
    MenuFontHeight,
    MenuFontName,
    MenuForegroundAlignment,
    MenuForegroundBitmap,
    MenuHidden,
    MenuItem,
    MenuItemEx,
    MenuSidebarAlignment,
    MenuSidebarBitmap,
    Name,
    PaintTransparentRegionBlack,
    Readme,
    ReadmeCharset,
    SakuraName2,
    Scope,
    ShellType,
    StickyWindow,
    UseSelfAlpha,
    ZOrder,
)

NEWLINES = {"crlf": "\r\n", "lf": "\n"}


# ---------------------------------------------------------------------------
# Value rendering
# ---------------------------------------------------------------------------

def _ids(ids: tuple[int, ...]) -> str:
    if not ids:
        raise ValueError("id list must not be empty")
    return ",".join(str(i) for i in ids)


def _item(item: BindMenuItem) -> str:
    return "-" if item.is_separator else str(item.animation_id)


def _repeats(*repeats) -> str:
    return "".join(r.value for r in repeats if r is not None)


def _option_flags(d: BindOptionGroup) -> str:
    tags = [tag for tag, on in (("mustselect", d.must_select),
                                ("multiple", d.multiple)) if on]
    if not tags:
        raise ValueError("bind option needs mustselect and/or multiple")
    return "+".join(tags)


def _thumbnail(thumbnail: Optional[str]) -> str:
    return "" if thumbnail is None else f",{thumbnail}"


# type -> (directive) -> "key,value"
_FORMATTERS: dict[type, Callable] = {
    # identity
    DescriptCharset: lambda d: f"charset,{d.charset.label}",
    Name:            lambda d: f"name,{d.value}",
    Id:              lambda d: f"id,{d.value}",
    ShellType:       lambda d: "type,shell",
    Craftman:        lambda d: f"craftman,{d.value}",
    CraftmanW:       lambda d: f"craftmanw,{d.value}",
    CraftmanUrl:     lambda d: f"craftmanurl,{d.value}",
    HomeUrl:         lambda d: f"homeurl,{d.value}",
    Readme:          lambda d: f"readme,{d.value}",
    ReadmeCharset:   lambda d: f"readme.charset,{d.charset.label}",
    MenuHidden:      lambda d: "menu,hidden",
    CharacterName:   lambda d: f"{d.scope.key}.name,{d.value}",
    SakuraName2:     lambda d: f"sakura.name2,{d.value}",
    # shell representation
    ZOrder:          lambda d: f"seriko.zorder,{_ids(d.ids)}",
    StickyWindow:    lambda d: f"seriko.sticky-window,{_ids(d.ids)}",
    AlignmentToDesktop: lambda d: (
        f"seriko.alignmenttodesktop,{d.position.value}" if d.scope is None
        else f"{d.scope.key}.seriko.alignmenttodesktop,{d.position.value}"
    ),
    DefaultX:        lambda d: f"{d.scope.key}.defaultx,{d.value}",
    DefaultY:        lambda d: f"{d.scope.key}.defaulty,{d.value}",
    DefaultLeft:     lambda d: f"{d.scope.key}.defaultleft,{d.value}",
    DefaultTop:      lambda d: f"{d.scope.key}.defaulttop,{d.value}",
    # balloon
    BalloonOffsetX:  lambda d: f"{d.scope.key}.balloon.offsetx,{d.value}",
    BalloonOffsetY:  lambda d: f"{d.scope.key}.balloon.offsety,{d.value}",
    BalloonAlignment: lambda d: f"{d.scope.key}.balloon.alignment,{d.position.value}",
    BalloonDontMove: lambda d: f"{d.scope.key}.balloon.dontmove,{d.flag}",
    # menu
    MenuFontName:    lambda d: f"menu.font.name,{d.value}",
    MenuFontHeight:  lambda d: f"menu.font.height,{d.value}",
    MenuBackgroundBitmap: lambda d: f"menu.background.bitmap.filename,{d.filename}",
    MenuForegroundBitmap: lambda d: f"menu.foreground.bitmap.filename,{d.filename}",
    MenuSidebarBitmap:    lambda d: f"menu.sidebar.bitmap.filename,{d.filename}",
    MenuColor:       lambda d: f"menu.{d.target.value}.color.{d.channel.value},{d.value}",
    MenuBackgroundAlignment: lambda d: (
        f"menu.background.alignment,{d.base.value}{_repeats(d.repeat, d.repeat2)}"
    ),
    MenuForegroundAlignment: lambda d: (
        f"menu.foreground.alignment,{d.base.value}{_repeats(d.repeat, d.repeat2)}"
    ),
    MenuSidebarAlignment: lambda d: (
        f"menu.sidebar.alignment,{d.base.value}{_repeats(d.repeat)}"
    ),
    # binding
    BindGroupName:   lambda d: (
        f"{d.scope.key}.bindgroup{d.group_id}.name,"
        f"{d.category},{d.part_name}{_thumbnail(d.thumbnail)}"
    ),
    BindGroupDefault: lambda d: f"{d.scope.key}.bindgroup{d.group_id}.default,{d.flag}",
    BindGroupAddId:  lambda d: f"{d.scope.key}.bindgroup{d.group_id}.addid,{_ids(d.ids)}",
    BindOptionGroup: lambda d: (
        f"{d.scope.key}.bindoption{d.option_id}.group,{d.category},{_option_flags(d)}"
    ),
    MenuItem:        lambda d: f"{d.scope.key}.menuitem{d.index},{_item(d.item)}",
    MenuItemEx:      lambda d: f"{d.scope.key}.menuitemex{d.index},{d.label},{_item(d.item)}",
    BindMenu:        lambda d: f"{d.scope.key}.menu,{d.visibility.value}",
    # alpha
    PaintTransparentRegionBlack: lambda d: f"seriko.paint_transparent_region_black,{d.flag}",
    UseSelfAlpha:    lambda d: f"seriko.use_self_alpha,{d.flag}",
}


# ---------------------------------------------------------------------------
# Text / bytes
# ---------------------------------------------------------------------------

def format_directive(directive: Directive) -> str:
    """Return the ``key,value`` line for *directive* (no terminator)."""
    try:
        fmt = _FORMATTERS[type(directive)]
    except KeyError:
        raise ValueError(f"unknown directive type: {type(directive).__name__}") from None
    return fmt(directive)


def format_line(line: Line) -> str:
    if isinstance(line, DirectiveLine):
        return format_directive(line.directive)
    if isinstance(line, CommentLine):
        return line.text
    if isinstance(line, BlankLine):
        return ""
    raise ValueError(f"unknown line type: {type(line).__name__}")


def format_document(document: Document, newline: str = "\r\n") -> str:
    """Render every line of *document*, each followed by *newline*."""
    if newline not in NEWLINES.values() and newline != "\r":
        raise ValueError(f"unsupported line terminator: {newline!r}")
    return "".join(format_line(line) + newline for line in document)


def encode_document(
    document: Document,
    charset: Optional[Charset] = None,
    newline: str = "\r\n",
) -> bytes:
    """
    Render and encode *document*.

    Uses *charset* if given, else the document's own ``charset,`` line, else
    Charset.DEFAULT.
    """
    if charset is None:
        charset = document.charset or Charset.DEFAULT
    return charset.encode(format_document(document, newline))


# ---------------------------------------------------------------------------
# Plain-data view (for JSON dumps)
# ---------------------------------------------------------------------------

def _plain(value):
    if isinstance(value, Charset):
        return value.label
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Scope):
        return value.key
    if isinstance(value, BindMenuItem):
        return "-" if value.is_separator else value.animation_id
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    return value


def directive_to_dict(directive: Directive) -> dict:
    out = {"type": type(directive).__name__}
    for f in fields(directive):
        out[f.name] = _plain(getattr(directive, f.name))
    return out


def document_to_dict(document: Document) -> dict:
    lines = []
    for line in document:
        if isinstance(line, DirectiveLine):
            lines.append(directive_to_dict(line.directive))
        elif isinstance(line, CommentLine):
            lines.append({"type": "comment", "text": line.text})
        else:
            lines.append({"type": "blank"})
    return {"charset": _plain(document.charset), "lines": lines}
