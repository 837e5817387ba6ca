"""Tolerant decoders for metric lines.

Both decoders accept any line that carries at least the mandatory prefix of
their layout.  Optional tail parts that are missing default to zero, and
parts past the last known field are ignored.  A present part that fails to
parse aborts the whole decode; no partially populated record is returned.
"""

from __future__ import annotations

import logging
import re

from metricline.codec.fields import (
    COMPACT_LAYOUT,
    LAYOUTS,
    SEPARATOR,
    VERBOSE_LAYOUT,
    FieldKind,
    FieldSpec,
    LineFormat,
    LineLayout,
    present_specs,
)
from metricline.exceptions import EmptyInputError, NumericParseError
from metricline.models.record import INT32_MAX, INT32_MIN, UINT32_MAX, UINT64_MAX, MetricRecord

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")

# UINT64_MAX has 20 digits; longer text cannot be in range for any field kind.
_MAX_DIGITS = len(str(UINT64_MAX))

_BOUNDS: dict[FieldKind, tuple[re.Pattern[str], int, int]] = {
    FieldKind.UINT64: (_UNSIGNED, 0, UINT64_MAX),
    FieldKind.UINT32: (_UNSIGNED, 0, UINT32_MAX),
    FieldKind.INT32: (_SIGNED, INT32_MIN, INT32_MAX),
}


def _parse_int(spec: FieldSpec, raw: str) -> int:
    pattern, low, high = _BOUNDS[spec.kind]
    if pattern.fullmatch(raw) is None:
        raise NumericParseError(spec.name, spec.position, raw)
    if len(raw.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        raise NumericParseError(spec.name, spec.position, raw, reason=f"out of {spec.kind} range")
    value = int(raw)
    if not low <= value <= high:
        raise NumericParseError(spec.name, spec.position, raw, reason=f"out of {spec.kind} range")
    return value


def _decode(line: str, layout: LineLayout) -> MetricRecord:
    line = line.rstrip("\r\n")
    if not line.strip():
        raise EmptyInputError()

    parts = line.split(SEPARATOR)
    specs = present_specs(layout, len(parts))

    values: dict[str, str | int] = {}
    for spec in specs:
        raw = parts[spec.position]
        if spec.kind is FieldKind.HUMAN_TIME:
            # Redundant with the numeric timestamp, which is authoritative.
            continue
        if spec.kind is FieldKind.TEXT:
            values[spec.name] = raw
        else:
            values[spec.name] = _parse_int(spec, raw)

    if len(parts) > layout.max_fields:
        logger.debug(
            "Ignoring %d trailing field(s) in %s metric line",
            len(parts) - layout.max_fields,
            layout.format,
        )
    elif len(parts) < layout.max_fields:
        logger.debug(
            "Legacy %s metric line with %d field(s); defaulting %s",
            layout.format,
            len(parts),
            ", ".join(spec.name for spec in layout.fields[len(parts) :]),
        )
    return MetricRecord.model_validate(values)


def decode_verbose(line: str) -> MetricRecord:
    """Decode a verbose metric line into a record.

    Accepts the current 11-field line as well as legacy lines of 8 to 10
    fields that predate ``occupied_pass_qps``, ``concurrency`` and
    ``classification``.

    Parameters:
        line: A single line produced by ``encode_verbose`` (a trailing line
            terminator is tolerated).

    Returns:
        The reconstructed ``MetricRecord``.

    Raises:
        EmptyInputError: If the line is empty or blank.
        MalformedFormatError: If the line has fewer than 8 fields.
        NumericParseError: If a present numeric field cannot be parsed.
    """
    return _decode(line, VERBOSE_LAYOUT)


def decode_compact(line: str) -> MetricRecord:
    """Decode a compact metric line (no human-readable timestamp).

    Requires at least 7 fields; the optional tail follows the same rules as
    ``decode_verbose``.
    """
    return _decode(line, COMPACT_LAYOUT)


def decode_line(line: str, fmt: LineFormat | str = LineFormat.VERBOSE) -> MetricRecord:
    """Decode a line of the given format.

    Raises:
        ValueError: If ``fmt`` does not name a ``LineFormat``.
        MetricFormatError: If the line cannot be decoded (see ``decode_verbose``).
    """
    return _decode(line, LAYOUTS[LineFormat(fmt)])
