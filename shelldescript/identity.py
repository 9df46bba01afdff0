"""
identity.py - Global identity directives: charset, name, author, readme.
"""

from __future__ import annotations

from .charset import parse_charset
from .nodes import (
    CharacterName,
    Craftman,
    CraftmanUrl,
    CraftmanW,
    DescriptCharset,
    HomeUrl,
    Id,
    MenuHidden,
    Name,
    Readme,
    ReadmeCharset,
    SakuraName2,
    ShellType,
)
from .primitives import Match, first_match, free_text, keyed, literal, scoped

RULES = (
    keyed("charset,", parse_charset, DescriptCharset),
    keyed("name,", free_text, Name),
    keyed("id,", free_text, Id),
    keyed("type,", literal("shell"), lambda _: ShellType()),
    keyed("craftman,", free_text, Craftman),
    keyed("craftmanw,", free_text, CraftmanW),
    keyed("craftmanurl,", free_text, CraftmanUrl),
    keyed("homeurl,", free_text, HomeUrl),
    keyed("readme,", free_text, Readme),
    keyed("readme.charset,", parse_charset, ReadmeCharset),
    keyed("menu,", literal("hidden"), lambda _: MenuHidden()),
    *scoped(".name,", free_text, CharacterName),
    keyed("sakura.name2,", free_text, SakuraName2),
)


def identity(text: str, pos: int) -> Match:
    return first_match(RULES, text, pos)
