"""Custom exceptions for metricline."""

from __future__ import annotations

__all__ = [
    "EmptyInputError",
    "MalformedFormatError",
    "MetricEncodeError",
    "MetricFormatError",
    "MetricLineError",
    "NumericParseError",
]


class MetricLineError(Exception):
    """Base exception for all metricline errors."""


class MetricFormatError(MetricLineError):
    """Raised when a metric line cannot be decoded."""


class EmptyInputError(MetricFormatError):
    """Raised when the metric line is empty or blank."""

    def __init__(self) -> None:
        super().__init__("invalid metric line: empty string")


class MalformedFormatError(MetricFormatError):
    """Raised when a metric line has fewer parts than its layout requires."""

    def __init__(self, field_count: int, minimum: int) -> None:
        super().__init__(
            f"invalid metric line: expected at least {minimum} fields, got {field_count}"
        )
        self.field_count = field_count
        self.minimum = minimum


class NumericParseError(MetricFormatError):
    """Raised when a present field cannot be parsed as its numeric type.

    Parameters:
        field: Name of the record field that failed.
        position: Zero-based index of the part within the line.
        value: The offending raw text.
    """

    def __init__(self, field: str, position: int, value: str, reason: str = "not a number") -> None:
        super().__init__(
            f"invalid metric line: field {field!r} at position {position}: "
            f"{reason} ({value!r})"
        )
        self.field = field
        self.position = position
        self.value = value


class MetricEncodeError(MetricLineError):
    """Raised when a record cannot be rendered as a metric line."""
