"""
charset.py - Charsets a descript.txt may declare, and the decoder for them.

The ``charset,`` directive names the encoding of the whole file.  Only the
tokens in ``_TOKENS`` are recognised; matching is exact and case-sensitive.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .errors import DecodeError
from .primitives import Match, keyword


class Charset(Enum):
    """A declared charset: (wire label, Python codec name)."""

    ASCII = ("ASCII", "ascii")
    UTF8 = ("UTF-8", "utf-8-sig")
    SHIFT_JIS = ("Shift_JIS", "cp932")
    EUC_JP = ("EUC-JP", "euc_jp")
    ISO_2022_JP = ("ISO-2022-JP", "iso2022_jp")
    # Used when the file carries no charset line; never parsed from text.
    DEFAULT = ("default", "utf-8-sig")

    def __init__(self, label: str, codec: str) -> None:
        self.label = label
        self.codec = codec

    def decode(self, data: bytes | bytearray) -> str:
        """Decode *data*; raise DecodeError if it is invalid for this charset."""
        try:
            return bytes(data).decode(self.codec)
        except UnicodeDecodeError as exc:
            raise DecodeError(self, exc.reason) from exc

    def encode(self, text: str) -> bytes:
        return text.encode(self.codec.replace("-sig", ""))


_TOKENS: dict[str, Charset] = {
    c.label: c for c in Charset if c is not Charset.DEFAULT
}

_charset_token = keyword(_TOKENS)


def parse_charset(text: str, pos: int) -> Match:
    """Match a charset token at *pos*; return (Charset, end) or None."""
    return _charset_token(text, pos)


def charset_from_label(label: str) -> Optional[Charset]:
    """Return the Charset whose wire label is exactly *label*, else None."""
    return _TOKENS.get(label)


def decode(data: bytes | bytearray, charset: Charset) -> str:
    return charset.decode(data)
