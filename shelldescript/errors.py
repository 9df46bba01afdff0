"""
errors.py - Exception types raised while decoding or parsing descript.txt.

Every error is a ValueError, so callers that already guard file handling with
``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class DescriptError(ValueError):
    """Base class for all descript.txt decode and parse failures."""


class CharsetError(DescriptError):
    """A ``charset,`` line names a charset that is not recognised."""

    def __init__(self, name: str, line: Optional[int] = None) -> None:
        self.name = name
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"unknown charset {name!r}{where}")


class DecodeError(DescriptError):
    """The byte buffer is not valid for the charset chosen by the prescan."""

    def __init__(self, charset, reason: str = "") -> None:
        self.charset = charset
        self.reason = reason
        msg = f"decoding failed: to {charset.label}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class DescriptSyntaxError(DescriptError):
    """
    No directive or blank-line rule matched at *offset*.

    *line* and *column* are 1-based; *remainder* is the unparsed text starting
    at *offset*.
    """

    def __init__(self, offset: int, line: int, column: int, remainder: str) -> None:
        self.offset = offset
        self.line = line
        self.column = column
        self.remainder = remainder
        super().__init__(
            f"syntax error at line {line}, column {column}: {self.source_line!r}"
        )

    @property
    def source_line(self) -> str:
        """The offending text up to the next line terminator."""
        for i, ch in enumerate(self.remainder):
            if ch in "\r\n":
                return self.remainder[:i]
        return self.remainder
