"""The metric record model: one resource's statistics for one sampling window."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

GAUGE_FIELDS: tuple[str, ...] = (
    "pass_qps",
    "block_qps",
    "complete_qps",
    "error_qps",
    "avg_rt",
    "occupied_pass_qps",
    "concurrency",
)


class MetricRecord(BaseModel):
    """Traffic statistics of a single resource during one sampling window.

    Records are immutable value snapshots.  The producing collaborator aligns
    ``timestamp`` (epoch milliseconds) to a window boundary; alignment is not
    checked here.  Integer bounds mirror the fixed-width types of the wire
    format, so any record that constructs successfully also encodes.
    """

    model_config = ConfigDict(frozen=True)

    resource: str
    classification: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    timestamp: int = Field(ge=0, le=UINT64_MAX)

    pass_qps: int = Field(default=0, ge=0, le=UINT64_MAX)
    block_qps: int = Field(default=0, ge=0, le=UINT64_MAX)
    complete_qps: int = Field(default=0, ge=0, le=UINT64_MAX)
    error_qps: int = Field(default=0, ge=0, le=UINT64_MAX)
    avg_rt: int = Field(default=0, ge=0, le=UINT64_MAX)
    occupied_pass_qps: int = Field(default=0, ge=0, le=UINT64_MAX)
    concurrency: int = Field(default=0, ge=0, le=UINT32_MAX)

    def to_verbose_line(self) -> str:
        """Encode this record in the 11-field verbose format."""
        from metricline.codec.encoder import encode_verbose

        return encode_verbose(self)

    def to_compact_line(self) -> str:
        """Encode this record in the 10-field compact format."""
        from metricline.codec.encoder import encode_compact

        return encode_compact(self)

    @classmethod
    def from_verbose_line(cls, line: str) -> MetricRecord:
        """Decode a verbose metric line, including legacy 8- to 10-field lines."""
        from metricline.codec.decoder import decode_verbose

        return decode_verbose(line)

    def gauge_values(self) -> dict[str, int]:
        """Return the seven numeric gauge fields keyed by field name."""
        return {name: getattr(self, name) for name in GAUGE_FIELDS}

    def gauge_labels(self) -> dict[str, str]:
        """Return the label set identifying this record's gauges."""
        return {
            "resource": self.resource,
            "classification": str(self.classification),
            "timestamp": str(self.timestamp),
        }
