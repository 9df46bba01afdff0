"""
parser.py - Charset prescan, decoding, and the line-oriented document parser.

Entry points:

  detect_charset(data)         prescan raw bytes for a ``charset,`` line
  decode_bytes(data)           prescan + decode to text
  parse(text)                  text -> Document
  parse_bytes(data)            decode_bytes + parse
  load_file(path)              read a descript.txt from disk and parse it

Parsing is all-or-nothing: the first line no rule accepts raises
DescriptSyntaxError and no partial Document is returned.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .alpha import alpha
from .balloon import balloon_representation
from .binding import binding
from .charset import Charset, parse_charset
from .errors import CharsetError, DescriptSyntaxError
from .identity import identity
from .menu import menu
from .nodes import BLANK, Document, DirectiveLine, Line
from .primitives import Match, free_text, line_end, newline
from .representation import shell_representation

# Tried in this order; the first namespace with a matching rule wins.
NAMESPACES = (
    identity,
    shell_representation,
    balloon_representation,
    menu,
    binding,
    alpha,
)

_CHARSET_KEY = "charset,"
_BOM = "\ufeff"


# ---------------------------------------------------------------------------
# Charset prescan
# ---------------------------------------------------------------------------

def prescan_charset(text: str) -> Charset:
    """
    Return the charset named by the first line starting with ``charset,``.

    Every other line is skipped without being parsed.  Returns
    Charset.DEFAULT when no such line exists; raises CharsetError when the
    line names an unknown charset.
    """
    pos = 1 if text.startswith(_BOM) else 0
    line_no = 1
    while pos < len(text):
        if text.startswith(_CHARSET_KEY, pos):
            start = pos + len(_CHARSET_KEY)
            m = parse_charset(text, start)
            if m is not None and line_end(text, m[1]) is not None:
                return m[0]
            token = free_text(text, start)
            raise CharsetError(token[0] if token else "", line_no)
        rest = free_text(text, pos)
        end = rest[1] if rest else pos
        nl = newline(text, end)
        if nl is None:
            break
        pos = nl[1]
        line_no += 1
    return Charset.DEFAULT


def detect_charset(data: bytes | bytearray) -> Charset:
    """Prescan a lossy UTF-8 view of *data* for its declared charset."""
    return prescan_charset(bytes(data).decode("utf-8", errors="replace"))


def decode_bytes(data: bytes | bytearray, charset: Optional[Charset] = None) -> str:
    """
    Decode a raw descript.txt to text.

    The charset comes from the prescan unless *charset* overrides it.
    Raises CharsetError or DecodeError.
    """
    if charset is None:
        charset = detect_charset(data)
    return charset.decode(data)


# ---------------------------------------------------------------------------
# Line dispatcher
# ---------------------------------------------------------------------------

def _directive(text: str, pos: int) -> Match:
    for namespace in NAMESPACES:
        m = namespace(text, pos)
        if m is not None:
            return m
    return None


def parse_line(text: str, pos: int = 0) -> Optional[tuple[Line, int]]:
    """
    Match one line at *pos*: a directive followed by a terminator (or the
    end of input), or a bare terminator.  Returns (line, next_pos) or None.
    """
    m = _directive(text, pos)
    if m is not None:
        directive, end = m
        # The first matching rule is final: trailing text fails the line.
        term = line_end(text, end)
        if term is None:
            return None
        return DirectiveLine(directive), term[1]
    m = newline(text, pos)
    if m is not None:
        return BLANK, m[1]
    return None


# ---------------------------------------------------------------------------
# Document assembler
# ---------------------------------------------------------------------------

def _location(text: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of *offset*; CRLF, CR and LF end one line each."""
    line, line_start, pos = 1, 0, 0
    while pos < offset:
        nl = newline(text, pos)
        if nl is not None and nl[1] <= offset:
            line += 1
            pos = line_start = nl[1]
        else:
            pos += 1
    return line, offset - line_start + 1


def syntax_error(text: str, offset: int) -> DescriptSyntaxError:
    line, column = _location(text, offset)
    return DescriptSyntaxError(offset, line, column, text[offset:])


def parse(text: str) -> Document:
    """Parse decoded descript.txt text into a Document."""
    lines: list[Line] = []
    pos = 0
    while pos < len(text):
        m = parse_line(text, pos)
        if m is None:
            break
        line, pos = m
        lines.append(line)
    if pos != len(text):
        raise syntax_error(text, pos)
    return Document(tuple(lines))


def parse_bytes(data: bytes | bytearray, charset: Optional[Charset] = None) -> Document:
    return parse(decode_bytes(data, charset))


def load_file(
    path: str | os.PathLike,
    charset: Optional[Charset] = None,
    verbose: bool = False,
) -> Document:
    """Read *path*, decode it with its declared (or the given) charset, parse."""
    path = Path(path)
    data = path.read_bytes()
    if charset is None:
        charset = detect_charset(data)
    if verbose:
        print(f"Decoding {path.name} as {charset.label}")
    return parse(charset.decode(data))
