"""Minimal markup scanner — locates one path's `d` attribute by linear forward scan.

No tree, no backtracking. Every scan is bounded by the remaining input and
fails with a typed error instead of running off the end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vectorloop.errors import MalformedMarkup, NotFound

logger = logging.getLogger(__name__)

_NAME_TERMINATORS = frozenset(" \t\r\n/>")


@dataclass
class Field:
    tag: str
    content: str
    is_closing: bool = False


@dataclass
class Attribute:
    name: str
    value: str


class TextCursor:
    """Forward-only position over an immutable string."""

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def remaining(self) -> str:
        return self.text[self.pos :]

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.text)

    def find(self, char: str, start: int | None = None) -> int:
        """Index of the next `char` at or after `start`, or -1."""
        return self.text.find(char, self.pos if start is None else start)

    def skip_whitespace(self, extra: str = "") -> None:
        text = self.text
        while self.pos < len(text) and (text[self.pos].isspace() or text[self.pos] in extra):
            self.pos += 1


def next_field(cursor: TextCursor) -> Field:
    """Extract the next tag, advancing the cursor past its closing `>`."""
    start = cursor.find("<")
    if start < 0:
        raise MalformedMarkup("Input ended before the next '<'")

    end = cursor.find(">", start + 1)
    if end < 0:
        raise MalformedMarkup(f"Tag starting at offset {start} is never closed with '>'")

    pos = start + 1
    is_closing = cursor.text.startswith("/", pos)
    if is_closing:
        pos += 1

    name_end = pos
    while name_end < end and cursor.text[name_end] not in _NAME_TERMINATORS:
        name_end += 1

    tag = cursor.text[pos:name_end]
    content = cursor.text[name_end:end].strip()
    cursor.pos = end + 1
    return Field(tag=tag, content=content, is_closing=is_closing)


def next_attribute(cursor: TextCursor) -> Attribute:
    """Extract the next `name="value"` pair from a tag's attribute blob."""
    cursor.skip_whitespace(extra="/")
    if cursor.exhausted:
        raise NotFound("No attributes left in tag")

    eq = cursor.find("=")
    if eq < 0:
        raise MalformedMarkup(f"Attribute {cursor.remaining.strip()!r} has no '='")
    name = cursor.text[cursor.pos : eq].strip()

    open_quote = cursor.find('"', eq + 1)
    if open_quote < 0 or cursor.text[eq + 1 : open_quote].strip():
        raise MalformedMarkup(f"Attribute {name!r} value is not double-quoted")
    close_quote = cursor.find('"', open_quote + 1)
    if close_quote < 0:
        raise MalformedMarkup(f"Attribute {name!r} has an unmatched quote")

    value = cursor.text[open_quote + 1 : close_quote]
    cursor.pos = close_quote + 1
    return Attribute(name=name, value=value)


def find_tag(cursor: TextCursor, name: str) -> Field:
    """Advance to the next opening tag called `name`."""
    while True:
        if cursor.find("<") < 0:
            raise NotFound(f"Tag <{name}> not found")
        field = next_field(cursor)
        if field.tag == name and not field.is_closing:
            return field
        logger.debug("Skipping <%s%s>", "/" if field.is_closing else "", field.tag)


def find_attribute(blob: str, name: str) -> str:
    """Value of attribute `name` in a tag's attribute blob."""
    cursor = TextCursor(blob)
    while True:
        try:
            attr = next_attribute(cursor)
        except NotFound:
            raise NotFound(f"Attribute {name!r} not found") from None
        if attr.name == name:
            return attr.value


def locate_path_data(text: str, require_group: bool = True) -> str:
    """Return the `d` attribute of the first <path> nested under <svg> (and <g>)."""
    cursor = TextCursor(text)
    find_tag(cursor, "svg")
    if require_group:
        find_tag(cursor, "g")
    path_field = find_tag(cursor, "path")
    d = find_attribute(path_field.content, "d")
    logger.debug("Located path data (%d chars)", len(d))
    return d
