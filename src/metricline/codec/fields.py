"""Field layouts for the verbose and compact metric line formats.

The formats grow by appending optional parts at the tail of the line.  Each
layout lists every known part in order together with the number of leading
parts a line must carry.  A line's part count therefore determines exactly
which record fields it populates; parts past the end of the layout are
ignored so that older readers keep working against newer writers.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

from metricline.exceptions import MalformedFormatError

SEPARATOR = "|"
PLACEHOLDER = "_"


class FieldKind(StrEnum):
    """How the text of a single part is interpreted."""

    UINT64 = "uint64"
    UINT32 = "uint32"
    INT32 = "int32"
    TEXT = "text"
    HUMAN_TIME = "human_time"


class FieldSpec(NamedTuple):
    position: int
    name: str
    kind: FieldKind


class LineFormat(StrEnum):
    """The two line representations of a metric record."""

    VERBOSE = "verbose"
    COMPACT = "compact"


class LineLayout(NamedTuple):
    """Ordered part specs of a line format and its mandatory prefix length."""

    format: LineFormat
    fields: tuple[FieldSpec, ...]
    mandatory: int

    @property
    def max_fields(self) -> int:
        return len(self.fields)


def _layout(fmt: LineFormat, mandatory: int, *parts: tuple[str, FieldKind]) -> LineLayout:
    specs = tuple(FieldSpec(i, name, kind) for i, (name, kind) in enumerate(parts))
    return LineLayout(format=fmt, fields=specs, mandatory=mandatory)


_TAIL: tuple[tuple[str, FieldKind], ...] = (
    ("pass_qps", FieldKind.UINT64),
    ("block_qps", FieldKind.UINT64),
    ("complete_qps", FieldKind.UINT64),
    ("error_qps", FieldKind.UINT64),
    ("avg_rt", FieldKind.UINT64),
    # Optional from here on; absent parts default to zero.
    ("occupied_pass_qps", FieldKind.UINT64),
    ("concurrency", FieldKind.UINT32),
    ("classification", FieldKind.INT32),
)

VERBOSE_LAYOUT = _layout(
    LineFormat.VERBOSE,
    8,
    ("timestamp", FieldKind.UINT64),
    ("human_time", FieldKind.HUMAN_TIME),
    ("resource", FieldKind.TEXT),
    *_TAIL,
)

COMPACT_LAYOUT = _layout(
    LineFormat.COMPACT,
    7,
    ("timestamp", FieldKind.UINT64),
    ("resource", FieldKind.TEXT),
    *_TAIL,
)

LAYOUTS: dict[LineFormat, LineLayout] = {
    LineFormat.VERBOSE: VERBOSE_LAYOUT,
    LineFormat.COMPACT: COMPACT_LAYOUT,
}


def present_specs(layout: LineLayout, field_count: int) -> tuple[FieldSpec, ...]:
    """Return the part specs carried by a line with ``field_count`` parts.

    Raises:
        MalformedFormatError: If ``field_count`` is below the layout's
            mandatory prefix.
    """
    if field_count < layout.mandatory:
        raise MalformedFormatError(field_count, layout.mandatory)
    return layout.fields[: min(field_count, layout.max_fields)]


def populated_fields(layout: LineLayout, field_count: int) -> tuple[str, ...]:
    """Return the record field names populated by a line with ``field_count`` parts.

    The human-readable timestamp is never mapped onto a record field, so it
    does not appear in the result.

    Example::

        >>> populated_fields(VERBOSE_LAYOUT, 9)[-1]
        'occupied_pass_qps'
    """
    return tuple(
        spec.name
        for spec in present_specs(layout, field_count)
        if spec.kind is not FieldKind.HUMAN_TIME
    )
