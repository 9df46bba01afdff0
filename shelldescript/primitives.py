"""
primitives.py - Low-level matchers and the rule-table helpers built on them.

Every rule is a plain function ``rule(text, pos) -> (value, end) | None``.
A rule never mutates anything; ``None`` means "no match at *pos*" and the
caller is free to try the next alternative from the same position.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Iterable, Optional, Sequence

from .nodes import Scope

Match = Optional[tuple[Any, int]]
Rule = Callable[[str, int], Match]

_DIGITS = "0123456789"

# Scope prefixes a scoped directive family may be instantiated for.
FIXED_ROLES = ("sakura", "kero")
ALL_ROLES = ("sakura", "kero", "char")


# ---------------------------------------------------------------------------
# Terminal matchers
# ---------------------------------------------------------------------------

def _digits_end(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def _magnitude(text: str, pos: int, limit: int) -> Match:
    """Digit run at *pos* read as an int in ``0..limit``; leading zeros are free."""
    end = _digits_end(text, pos)
    if end == pos:
        return None
    start = pos
    while start < end - 1 and text[start] == "0":
        start += 1
    # More significant digits than the limit has.
    if end - start > len(str(limit)):
        return None
    value = int(text[start:end])
    if value > limit:
        return None
    return value, end


def unsigned(bits: int) -> Rule:
    """One or more ASCII digits whose value fits in an unsigned *bits* int."""
    limit = (1 << bits) - 1

    def match(text: str, pos: int) -> Match:
        return _magnitude(text, pos, limit)

    return match


def signed(bits: int) -> Rule:
    """
    An optional ``-`` followed by digits.

    The digits alone must fit a signed *bits* int, so the most negative
    value of the width is not accepted.
    """
    hi = (1 << (bits - 1)) - 1

    def match(text: str, pos: int) -> Match:
        negative = text.startswith("-", pos)
        m = _magnitude(text, pos + 1 if negative else pos, hi)
        if m is None:
            return None
        value, end = m
        return (-value if negative else value), end

    return match


u8 = unsigned(8)
u32 = unsigned(32)
i64 = signed(64)


def _run_until(text: str, pos: int, stop: str) -> Match:
    end = pos
    while end < len(text) and text[end] not in stop:
        end += 1
    if end == pos:
        return None
    return text[pos:end], end


def free_text(text: str, pos: int) -> Match:
    """One or more characters up to (not including) the line terminator."""
    return _run_until(text, pos, "\r\n")


def field_text(text: str, pos: int) -> Match:
    """One or more characters up to the next comma or line terminator."""
    return _run_until(text, pos, ",\r\n")


def newline(text: str, pos: int) -> Match:
    """CRLF, CR or LF."""
    if text.startswith("\r\n", pos):
        return "\r\n", pos + 2
    if pos < len(text) and text[pos] in "\r\n":
        return text[pos], pos + 1
    return None


def line_end(text: str, pos: int) -> Match:
    """A line terminator, or the end of input (which consumes nothing)."""
    if pos >= len(text):
        return "", pos
    return newline(text, pos)


def literal(tag: str, value: Any = None) -> Rule:
    """Exact, case-sensitive *tag*; yields *value* (default: the tag itself)."""
    result = tag if value is None else value

    def match(text: str, pos: int) -> Match:
        if text.startswith(tag, pos):
            return result, pos + len(tag)
        return None

    return match


def keyword(table: dict[str, Any]) -> Rule:
    """
    Closed enumeration of literal tags mapped to values.

    Longer tags are tried first so that a tag which is a prefix of another
    never shadows it.
    """
    ordered = sorted(table.items(), key=lambda kv: len(kv[0]), reverse=True)

    def match(text: str, pos: int) -> Match:
        for tag, value in ordered:
            if text.startswith(tag, pos):
                return value, pos + len(tag)
        return None

    return match


def char_id(text: str, pos: int) -> Match:
    """``char`` followed by a 32-bit entity id, e.g. ``char5``."""
    if not text.startswith("char", pos):
        return None
    return u32(text, pos + 4)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

def preceded(tag: str, rule: Rule) -> Rule:
    """Literal *tag* then *rule*; yields the value of *rule*."""

    def match(text: str, pos: int) -> Match:
        if not text.startswith(tag, pos):
            return None
        return rule(text, pos + len(tag))

    return match


def sequence(*rules: Rule) -> Rule:
    """All *rules* in order; yields a tuple of their values."""

    def match(text: str, pos: int) -> Match:
        values = []
        for rule in rules:
            m = rule(text, pos)
            if m is None:
                return None
            value, pos = m
            values.append(value)
        return tuple(values), pos

    return match


def optional(rule: Rule) -> Rule:
    """*rule* if it matches, otherwise None without consuming input."""

    def match(text: str, pos: int) -> Match:
        m = rule(text, pos)
        if m is None:
            return None, pos
        return m

    return match


def choice(*rules: Rule) -> Rule:
    """The first of *rules* that matches."""

    def match(text: str, pos: int) -> Match:
        return first_match(rules, text, pos)

    return match


def mapped(rule: Rule, fn: Callable[[Any], Any]) -> Rule:
    def match(text: str, pos: int) -> Match:
        m = rule(text, pos)
        if m is None:
            return None
        return fn(m[0]), m[1]

    return match


def separated1(rule: Rule, sep: str) -> Rule:
    """
    One or more *rule* matches separated by *sep*; yields a tuple.

    A trailing separator with nothing after it is left unconsumed.
    """

    def match(text: str, pos: int) -> Match:
        m = rule(text, pos)
        if m is None:
            return None
        first, pos = m
        values = [first]
        while text.startswith(sep, pos):
            m = rule(text, pos + len(sep))
            if m is None:
                break
            value, pos = m
            values.append(value)
        return tuple(values), pos

    return match


def first_match(rules: Iterable[Rule], text: str, pos: int) -> Match:
    for rule in rules:
        m = rule(text, pos)
        if m is not None:
            return m
    return None


# ---------------------------------------------------------------------------
# Directive-table helpers
# ---------------------------------------------------------------------------

def keyed(prefix: str, payload: Rule, build: Callable[[Any], Any]) -> Rule:
    """Directive with a fixed key *prefix*; ``build(value)`` makes the node."""
    return mapped(preceded(prefix, payload), build)


def _char_scoped(suffix: str, payload: Rule, build: Callable) -> Rule:
    def match(text: str, pos: int) -> Match:
        m = char_id(text, pos)
        if m is None or not text.startswith(suffix, m[1]):
            return None
        scope = Scope.char(m[0])
        body = payload(text, m[1] + len(suffix))
        if body is None:
            return None
        return build(scope, body[0]), body[1]

    return match


def scoped(
    suffix: str,
    payload: Rule,
    build: Callable[[Scope, Any], Any],
    roles: Sequence[str] = ALL_ROLES,
) -> tuple[Rule, ...]:
    """
    Instantiate one directive family for each scope prefix in *roles*.

    ``sakura`` and ``kero`` become fixed literals (``sakura`` + *suffix*);
    ``char`` parses ``charN`` and then *suffix*.  ``build(scope, value)``
    makes the node.
    """
    rules: list[Rule] = []
    for role in roles:
        if role == "char":
            rules.append(_char_scoped(suffix, payload, build))
        else:
            rules.append(keyed(role + suffix, payload, partial(build, Scope(role))))
    return tuple(rules)
