"""Path-command parser — converts SVG `d` text into an absolute-coordinate Path.

Supported: M/m (leading only), L/l, H/h, V/v, Q/q, T/t, C/c, S/s, Z/z (trailing only).
Uppercase commands take absolute coordinates, lowercase are relative to the
current point. Shorthand T/S reflect the previous control point through the
current point.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field

from vectorloop.engine.segments import Path, Segment
from vectorloop.errors import MalformedPath, UnclosedPath, UnsupportedCommand
from vectorloop.utils.geometry import Vec2, reflect

logger = logging.getLogger(__name__)

# Sign, digits with at most one decimal point, optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Whitespace and at most one comma between numbers.
_SEPARATOR_RE = re.compile(r"\s*(?:,\s*)?")

# e/E are never commands; keeping them out of the split leaves exponents inside number runs.
_COMMAND_RE = re.compile(r"([A-DF-Za-df-z])([^A-DF-Za-df-z]*)")

# Arguments consumed per repetition of each command.
_ARG_COUNTS = {
    "m": 2, "l": 2, "h": 1, "v": 1,
    "q": 4, "t": 2, "c": 6, "s": 4,
    "z": 0,
}

_DEFAULT_TOLERANCE = 1e-9


def parse_numbers(text: str) -> list[float]:
    """Lex a run of numbers separated by whitespace, one comma, or the next number's sign.

    >>> parse_numbers("10-20,30")
    [10.0, -20.0, 30.0]
    """
    values: list[float] = []
    pos = len(text) - len(text.lstrip())
    length = len(text)
    while pos < length:
        match = _NUMBER_RE.match(text, pos)
        if match is None:
            raise MalformedPath(f"Invalid number at offset {pos} in {text!r}")
        value = float(match.group())
        if not math.isfinite(value):
            raise MalformedPath(f"Number {match.group()!r} is out of range")
        values.append(value)
        sep = _SEPARATOR_RE.match(text, match.end())
        pos = sep.end()
        if pos >= length and "," in sep.group():
            raise MalformedPath(f"Trailing comma in {text!r}")
    return values


@dataclass
class ParserState:
    current: Vec2
    origin: Vec2
    # Last control of any q/t/c/s command; lines leave it untouched.
    previous_control: Vec2 | None = None
    segments: list[Segment] = field(default_factory=list)

    def resolve(self, x: float, y: float, relative: bool) -> Vec2:
        p = Vec2(x, y)
        return self.current + p if relative else p

    def implied_control(self) -> Vec2:
        if self.previous_control is None:
            return self.current
        return reflect(self.previous_control, self.current)

    def emit(self, segment: Segment, control: Vec2 | None = None) -> None:
        self.segments.append(segment)
        self.current = segment.end
        if control is not None:
            self.previous_control = control


def _apply(state: ParserState, cmd: str, args: list[float]) -> None:
    """Apply one argument group of a draw command to the parser state."""
    rel = cmd.islower()
    op = cmd.lower()
    cur = state.current

    if op == "l":
        state.emit(Segment.line(cur, state.resolve(args[0], args[1], rel)))
    elif op == "h":
        x = cur.x + args[0] if rel else args[0]
        state.emit(Segment.line(cur, Vec2(x, cur.y)))
    elif op == "v":
        y = cur.y + args[0] if rel else args[0]
        state.emit(Segment.line(cur, Vec2(cur.x, y)))
    elif op == "q":
        ctrl = state.resolve(args[0], args[1], rel)
        end = state.resolve(args[2], args[3], rel)
        state.emit(Segment.quadratic(cur, ctrl, end), ctrl)
    elif op == "t":
        ctrl = state.implied_control()
        end = state.resolve(args[0], args[1], rel)
        state.emit(Segment.quadratic(cur, ctrl, end), ctrl)
    elif op == "c":
        c0 = state.resolve(args[0], args[1], rel)
        c1 = state.resolve(args[2], args[3], rel)
        end = state.resolve(args[4], args[5], rel)
        state.emit(Segment.cubic(cur, c0, c1, end), c1)
    elif op == "s":
        c0 = state.implied_control()
        c1 = state.resolve(args[0], args[1], rel)
        end = state.resolve(args[2], args[3], rel)
        state.emit(Segment.cubic(cur, c0, c1, end), c1)
    else:
        raise UnsupportedCommand(cmd)


def _split_commands(d: str) -> list[tuple[str, list[float]]]:
    """Split whitespace-free path text into (command, numbers) runs."""
    runs: list[tuple[str, list[float]]] = []
    pos = 0
    for match in _COMMAND_RE.finditer(d):
        if match.start() != pos:
            raise MalformedPath(f"Unexpected text {d[pos:match.start()]!r} before command")
        cmd, arg_text = match.group(1), match.group(2)
        if cmd.lower() not in _ARG_COUNTS:
            raise UnsupportedCommand(cmd)
        runs.append((cmd, parse_numbers(arg_text)))
        pos = match.end()
    if pos != len(d):
        raise MalformedPath(f"Unexpected trailing text {d[pos:]!r}")
    return runs


def _groups(cmd: str, values: list[float]) -> list[list[float]]:
    size = _ARG_COUNTS[cmd.lower()]
    if size == 0:
        if values:
            raise MalformedPath(f"'{cmd}' takes no arguments, got {len(values)}")
        return []
    if not values or len(values) % size:
        raise MalformedPath(f"'{cmd}' takes {size} arguments per group, got {len(values)}")
    return [values[i : i + size] for i in range(0, len(values), size)]


def parse_path(
    d: str,
    tolerance: float = _DEFAULT_TOLERANCE,
    strict_closure: bool = False,
) -> Path:
    """Parse one closed contour.

    When the last command stops short of the moveto point, closepath adds the
    straight closing line, unless `strict_closure` is set, in which case the
    gap is an UnclosedPath error. An end point within `tolerance` of the
    moveto point is snapped onto it.

    Raises MalformedPath, UnsupportedCommand or UnclosedPath; never returns
    partial geometry.
    """
    text = d.strip()
    if not text:
        raise MalformedPath("Empty path data")

    runs = _split_commands(text)

    first_cmd, first_args = runs[0]
    if first_cmd not in ("M", "m"):
        raise MalformedPath(f"Path must start with a moveto, got {first_cmd!r}")
    last_cmd, last_args = runs[-1]
    if last_cmd not in ("Z", "z") or len(runs) < 2:
        raise MalformedPath("Path must end with a closepath ('z' or 'Z')")

    move_groups = _groups(first_cmd, first_args)
    # Initial current point is the origin, so relative and absolute moveto agree.
    origin = Vec2(move_groups[0][0], move_groups[0][1])
    state = ParserState(current=origin, origin=origin)

    # Extra moveto pairs are implicit linetos.
    implicit_line = "l" if first_cmd == "m" else "L"
    for group in move_groups[1:]:
        _apply(state, implicit_line, group)

    for cmd, values in runs[1:-1]:
        if cmd in ("Z", "z"):
            raise MalformedPath("Unexpected commands after closepath")
        if cmd in ("M", "m"):
            # a second moveto would start another sub-path
            raise UnsupportedCommand(cmd)
        for group in _groups(cmd, values):
            _apply(state, cmd, group)
    _groups(last_cmd, last_args)

    if not state.segments:
        raise MalformedPath("Path has no drawing commands")

    segments = state.segments
    end = state.current
    if end.isclose(state.origin, tolerance):
        if end != state.origin:
            segments[-1] = segments[-1].with_end(state.origin)
    elif strict_closure:
        raise UnclosedPath(
            f"Contour ends at ({end.x}, {end.y}), expected ({state.origin.x}, {state.origin.y})"
        )
    else:
        segments.append(Segment.line(end, state.origin))

    path = Path(tuple(segments))
    if not path.is_closed():
        raise UnclosedPath("Contour does not return to its moveto point")

    logger.debug("Parsed path: %d segments from %d commands", len(segments), len(runs))
    return path
