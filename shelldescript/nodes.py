"""
nodes.py - The parsed form of a descript.txt.

A Document is an immutable, ordered tuple of lines.  A line is blank, a
comment (reserved, never produced by the parser) or a directive.  Directives
are frozen dataclasses grouped by namespace; a family that exists for
several entities (``sakura.``, ``kero.``, ``charN.``) is a single class with
a ``scope`` field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional, Union

if TYPE_CHECKING:
    from .charset import Charset


# ---------------------------------------------------------------------------
# Scopes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Scope:
    """Entity a scoped directive applies to: sakura, kero or charN."""
    role: str                       # 'sakura', 'kero' or 'char'
    char_id: Optional[int] = None   # only for role == 'char'

    @classmethod
    def char(cls, char_id: int) -> Scope:
        return cls("char", char_id)

    @property
    def key(self) -> str:
        """The key prefix as written in the file, e.g. ``char3``."""
        if self.role == "char":
            return f"char{self.char_id}"
        return self.role


SAKURA = Scope("sakura")
KERO = Scope("kero")


# ---------------------------------------------------------------------------
# Enumerations (value = wire tag)
# ---------------------------------------------------------------------------

class SurfacePosition(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    FREE = "free"


class BalloonPosition(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


class MenuAlignmentBase(Enum):
    LEFTTOP = "lefttop"
    CENTERTOP = "centertop"
    RIGHTTOP = "righttop"
    LEFTBOTTOM = "leftbottom"
    CENTERBOTTOM = "centerbottom"
    RIGHTBOTTOM = "rightbottom"


class MenuRepeat(Enum):
    REPEAT_X = "+repeat-x"
    REPEAT_Y = "+repeat-y"


class SidebarBase(Enum):
    TOP = "top"
    BOTTOM = "bottom"


class SidebarRepeat(Enum):
    REPEAT_Y = "+repeat-y"


class MenuVisibility(Enum):
    AUTO = "auto"
    HIDDEN = "hidden"


class MenuColorTarget(Enum):
    """Menu element a ``menu.*.color.[rgb]`` key paints."""
    BACKGROUND_FONT = "background.font"
    FOREGROUND_FONT = "foreground.font"
    SEPARATOR = "separator"
    FRAME = "frame"
    DISABLE_FONT = "disable.font"


class ColorChannel(Enum):
    R = "r"
    G = "g"
    B = "b"


@dataclass(frozen=True)
class BindMenuItem:
    """A menu entry: an animation id, or the separator line when id is None."""
    animation_id: Optional[int] = None

    @property
    def is_separator(self) -> bool:
        return self.animation_id is None


MENU_SEPARATOR = BindMenuItem()


class Directive:
    """Base class of every directive payload."""

    __slots__ = ()


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DescriptCharset(Directive):
    charset: Charset


@dataclass(frozen=True)
class Name(Directive):
    value: str


@dataclass(frozen=True)
class Id(Directive):
    value: str


@dataclass(frozen=True)
class ShellType(Directive):
    """``type,shell``"""


@dataclass(frozen=True)
class Craftman(Directive):
    value: str


@dataclass(frozen=True)
class CraftmanW(Directive):
    value: str


@dataclass(frozen=True)
class CraftmanUrl(Directive):
    value: str


@dataclass(frozen=True)
class HomeUrl(Directive):
    value: str


@dataclass(frozen=True)
class Readme(Directive):
    value: str


@dataclass(frozen=True)
class ReadmeCharset(Directive):
    charset: Charset


@dataclass(frozen=True)
class MenuHidden(Directive):
    """``menu,hidden``"""


@dataclass(frozen=True)
class CharacterName(Directive):
    scope: Scope
    value: str


@dataclass(frozen=True)
class SakuraName2(Directive):
    value: str


# ---------------------------------------------------------------------------
# Shell representation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ZOrder(Directive):
    ids: tuple[int, ...]


@dataclass(frozen=True)
class StickyWindow(Directive):
    ids: tuple[int, ...]


@dataclass(frozen=True)
class AlignmentToDesktop(Directive):
    scope: Optional[Scope]          # None for the global seriko.alignmenttodesktop
    position: SurfacePosition


@dataclass(frozen=True)
class DefaultX(Directive):
    scope: Scope
    value: int


@dataclass(frozen=True)
class DefaultY(Directive):
    scope: Scope
    value: int


@dataclass(frozen=True)
class DefaultLeft(Directive):
    scope: Scope
    value: int


@dataclass(frozen=True)
class DefaultTop(Directive):
    scope: Scope
    value: int


# ---------------------------------------------------------------------------
# Balloon representation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BalloonOffsetX(Directive):
    scope: Scope
    value: int


@dataclass(frozen=True)
class BalloonOffsetY(Directive):
    scope: Scope
    value: int


@dataclass(frozen=True)
class BalloonAlignment(Directive):
    scope: Scope
    position: BalloonPosition


@dataclass(frozen=True)
class BalloonDontMove(Directive):
    scope: Scope
    flag: int


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MenuFontName(Directive):
    value: str


@dataclass(frozen=True)
class MenuFontHeight(Directive):
    value: int


@dataclass(frozen=True)
class MenuBackgroundBitmap(Directive):
    filename: str


@dataclass(frozen=True)
class MenuForegroundBitmap(Directive):
    filename: str


@dataclass(frozen=True)
class MenuSidebarBitmap(Directive):
    filename: str


@dataclass(frozen=True)
class MenuColor(Directive):
    target: MenuColorTarget
    channel: ColorChannel
    value: int


@dataclass(frozen=True)
class MenuBackgroundAlignment(Directive):
    base: MenuAlignmentBase
    repeat: Optional[MenuRepeat] = None
    repeat2: Optional[MenuRepeat] = None


@dataclass(frozen=True)
class MenuForegroundAlignment(Directive):
    base: MenuAlignmentBase
    repeat: Optional[MenuRepeat] = None
    repeat2: Optional[MenuRepeat] = None


@dataclass(frozen=True)
class MenuSidebarAlignment(Directive):
    base: SidebarBase
    repeat: Optional[SidebarRepeat] = None


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BindGroupName(Directive):
    """``<scope>.bindgroupN.name,category,part[,thumbnail]``"""
    scope: Scope
    group_id: int
    category: str
    part_name: str
    thumbnail: Optional[str] = None


@dataclass(frozen=True)
class BindGroupDefault(Directive):
    scope: Scope
    group_id: int
    flag: int


@dataclass(frozen=True)
class BindGroupAddId(Directive):
    scope: Scope
    group_id: int
    ids: tuple[int, ...]


@dataclass(frozen=True)
class BindOptionGroup(Directive):
    """``<scope>.bindoptionN.group,category,mustselect+multiple``"""
    scope: Scope
    option_id: int
    category: str
    must_select: bool
    multiple: bool


@dataclass(frozen=True)
class MenuItem(Directive):
    scope: Scope
    index: int
    item: BindMenuItem


@dataclass(frozen=True)
class MenuItemEx(Directive):
    scope: Scope
    index: int
    label: str
    item: BindMenuItem


@dataclass(frozen=True)
class BindMenu(Directive):
    """``<scope>.menu,auto|hidden``"""
    scope: Scope
    visibility: MenuVisibility


# ---------------------------------------------------------------------------
# Alpha
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PaintTransparentRegionBlack(Directive):
    flag: int


@dataclass(frozen=True)
class UseSelfAlpha(Directive):
    flag: int


# ---------------------------------------------------------------------------
# Lines and documents
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BlankLine:
    pass


@dataclass(frozen=True)
class CommentLine:
    """Reserved: no grammar rule produces comment lines yet."""
    text: str


@dataclass(frozen=True)
class DirectiveLine:
    directive: Directive


BLANK = BlankLine()

Line = Union[BlankLine, CommentLine, DirectiveLine]


@dataclass(frozen=True)
class Document:
    lines: tuple[Line, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def directives(self) -> Iterator[Directive]:
        """Directive payloads in file order, skipping blank/comment lines."""
        for line in self.lines:
            if isinstance(line, DirectiveLine):
                yield line.directive

    @property
    def charset(self) -> Optional[Charset]:
        """The first ``charset,`` directive's value, if any."""
        for d in self.directives():
            if isinstance(d, DescriptCharset):
                return d.charset
        return None
