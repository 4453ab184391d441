"""Path command model for glyph outlines.

This module defines the vocabulary shared by every transform:
- MoveTo, LineTo, QuadTo, CubicTo, Close: one frozen dataclass per command kind
- Outline: an ordered, immutable sequence of commands for one glyph
- Conversion to and from raw mapping records and the textual path syntax

Each command kind carries only the coordinate fields of its arity. A QuadTo
has no x2/y2 attribute at all, so "not applicable" can never be confused
with a legitimate coordinate at 0.
"""

import dataclasses
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from glyphstyler.exceptions import MalformedOutlineError, PathSyntaxError

# Point key -> (x field, y field)
POINT_FIELDS: dict[str, tuple[str, str]] = {
    "main": ("x", "y"),
    "c1": ("x1", "y1"),
    "c2": ("x2", "y2"),
}


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at an anchor."""

    x: float
    y: float

    type: ClassVar[str] = "M"
    point_keys: ClassVar[tuple[str, ...]] = ("main",)


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment to an anchor."""

    x: float
    y: float

    type: ClassVar[str] = "L"
    point_keys: ClassVar[tuple[str, ...]] = ("main",)


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier segment: one off-curve control, one on-curve endpoint."""

    x1: float
    y1: float
    x: float
    y: float

    type: ClassVar[str] = "Q"
    point_keys: ClassVar[tuple[str, ...]] = ("c1", "main")


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bezier segment: two off-curve controls, one on-curve endpoint."""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    type: ClassVar[str] = "C"
    point_keys: ClassVar[tuple[str, ...]] = ("c1", "c2", "main")


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath. Carries no coordinates."""

    type: ClassVar[str] = "Z"
    point_keys: ClassVar[tuple[str, ...]] = ()


PathCommand = MoveTo | LineTo | QuadTo | CubicTo | Close
Outline = tuple[PathCommand, ...]

COMMAND_TYPES: dict[str, type[PathCommand]] = {
    cls.type: cls for cls in (MoveTo, LineTo, QuadTo, CubicTo, Close)
}


def field_names(command: PathCommand) -> tuple[str, ...]:
    """Return the coordinate field names of a command in argument order."""
    return tuple(f.name for f in dataclasses.fields(command))


def iter_points(command: PathCommand) -> Iterable[tuple[str, float, float]]:
    """Yield (key, x, y) for every coordinate pair a command carries.

    Pairs are yielded in drawing order: controls first, the main point last.
    """
    for key in command.point_keys:
        x_field, y_field = POINT_FIELDS[key]
        yield key, getattr(command, x_field), getattr(command, y_field)


def replace_fields(command: PathCommand, **changes: float) -> PathCommand:
    """Return a copy of a command with some coordinate fields replaced."""
    if not changes:
        return command
    return dataclasses.replace(command, **changes)


def subpath_count(outline: Outline) -> int:
    """Count subpaths (MoveTo occurrences) in an outline."""
    return sum(1 for cmd in outline if isinstance(cmd, MoveTo))


def coordinate_count(outline: Outline) -> int:
    """Count coordinate pairs (anchors and controls) in an outline."""
    return sum(len(cmd.point_keys) for cmd in outline)


def from_records(records: Iterable[Mapping[str, Any]]) -> Outline:
    """Copy raw command records into an outline, field for field.

    Records are mappings with a one-letter ``type`` and the coordinate
    fields of that type, e.g. ``{"type": "Q", "x1": 5, "y1": 5, "x": 10, "y": 0}``.
    Fields a type does not use are ignored; nothing is recomputed.

    Args:
        records: Decoded command records in drawing order

    Returns:
        Outline with one command per record

    Raises:
        MalformedOutlineError: If a record has an unknown type or lacks a
            required coordinate field
    """
    outline: list[PathCommand] = []
    for index, record in enumerate(records):
        kind = record.get("type")
        cls = COMMAND_TYPES.get(kind)  # type: ignore[arg-type]
        if cls is None:
            raise MalformedOutlineError(index, f"unknown command type {kind!r}")

        values: dict[str, float] = {}
        for f in dataclasses.fields(cls):
            value = record.get(f.name)
            if value is None:
                raise MalformedOutlineError(
                    index, f"'{kind}' command is missing field '{f.name}'"
                )
            values[f.name] = value
        outline.append(cls(**values))

    return tuple(outline)


def to_records(outline: Outline) -> list[dict[str, Any]]:
    """Convert an outline to raw command records.

    Only the fields of each command's kind are emitted.
    """
    records: list[dict[str, Any]] = []
    for cmd in outline:
        record: dict[str, Any] = {"type": cmd.type}
        record.update(dataclasses.asdict(cmd))
        records.append(record)
    return records


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return repr(float(value))


def to_path_syntax(outline: Outline) -> str:
    """Render an outline as path syntax (``M x y L x y Q x1 y1 x y ... Z``).

    Numbers keep the precision they carry: ints render as ints, floats via
    repr. Open subpaths stay open.
    """
    groups: list[str] = []
    for cmd in outline:
        values = [_format_number(getattr(cmd, name)) for name in field_names(cmd)]
        groups.append(" ".join([cmd.type, *values]))
    return " ".join(groups)


_TOKEN_RE = re.compile(
    r"(?P<command>[A-Za-z])"
    r"|(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"|(?P<separator>[\s,]+)"
    r"|(?P<invalid>.)"
)
_INT_RE = re.compile(r"[-+]?\d+")


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        if kind == "separator":
            continue
        tokens.append((kind or "invalid", match.group()))
    return tokens


def parse_path_syntax(text: str) -> Outline:
    """Parse path syntax produced by :func:`to_path_syntax`.

    Only absolute ``M L Q C Z`` commands are accepted. Integer tokens parse
    to ``int`` and everything else to ``float``, so rendering the result
    reproduces the input numbers.

    Raises:
        PathSyntaxError: On unknown commands, stray numbers, invalid
            characters, or a wrong number of arguments
    """
    tokens = _tokenize(text)
    outline: list[PathCommand] = []
    position = 0

    while position < len(tokens):
        kind, value = tokens[position]
        if kind == "invalid":
            raise PathSyntaxError(position, f"unexpected character {value!r}")
        if kind == "number":
            raise PathSyntaxError(position, f"number {value} without a command")

        cls = COMMAND_TYPES.get(value)
        if cls is None:
            raise PathSyntaxError(position, f"unsupported command {value!r}")

        names = [f.name for f in dataclasses.fields(cls)]
        args: list[float] = []
        for offset in range(1, len(names) + 1):
            arg_position = position + offset
            if arg_position >= len(tokens) or tokens[arg_position][0] != "number":
                raise PathSyntaxError(
                    arg_position,
                    f"'{value}' expects {len(names)} numbers, got {offset - 1}",
                )
            token = tokens[arg_position][1]
            args.append(int(token) if _INT_RE.fullmatch(token) else float(token))

        outline.append(cls(*args))
        position += len(names) + 1

    return tuple(outline)


def replace_point(
    outline: Outline, command_index: int, key: str, x: float, y: float
) -> Outline:
    """Return a new outline with one point of one command replaced.

    Args:
        outline: Source outline (left untouched)
        command_index: Index of the command owning the point
        key: ``"main"``, ``"c1"`` or ``"c2"``
        x: New x coordinate
        y: New y coordinate

    Raises:
        MalformedOutlineError: If the index is out of range or the command
            has no such point
    """
    if not 0 <= command_index < len(outline):
        raise MalformedOutlineError(command_index, "command index out of range")

    cmd = outline[command_index]
    if key not in cmd.point_keys:
        raise MalformedOutlineError(
            command_index, f"'{cmd.type}' command has no point '{key}'"
        )

    x_field, y_field = POINT_FIELDS[key]
    updated = replace_fields(cmd, **{x_field: x, y_field: y})
    return outline[:command_index] + (updated,) + outline[command_index + 1 :]


def move_point(
    outline: Outline, command_index: int, key: str, dx: float, dy: float
) -> Outline:
    """Return a new outline with one point offset by (dx, dy)."""
    if not 0 <= command_index < len(outline):
        raise MalformedOutlineError(command_index, "command index out of range")

    cmd = outline[command_index]
    if key not in cmd.point_keys:
        raise MalformedOutlineError(
            command_index, f"'{cmd.type}' command has no point '{key}'"
        )

    x_field, y_field = POINT_FIELDS[key]
    return replace_point(
        outline,
        command_index,
        key,
        getattr(cmd, x_field) + dx,
        getattr(cmd, y_field) + dy,
    )
