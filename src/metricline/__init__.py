"""metricline: line encoding for time-bucketed resource traffic statistics.

Models:
    MetricRecord, GAUGE_FIELDS

Codec:
    encode_verbose, encode_compact, sanitize_resource,
    decode_verbose, decode_compact, decode_line,
    LineFormat, LineLayout, FieldSpec, FieldKind,
    VERBOSE_LAYOUT, COMPACT_LAYOUT, populated_fields, SEPARATOR, PLACEHOLDER

Protocols (extension points):
    MetricRecordRetriever, MetricExporter, TimePredicate, time_range

Exporters:
    InMemoryMetricExporter, LoggingMetricExporter,
    PrometheusMetricExporter, OTLPMetricExporter

Storage:
    InMemoryRecordStore

Configuration:
    ExporterConfig, OTLPConfig

Exceptions:
    MetricLineError, MetricFormatError, EmptyInputError,
    MalformedFormatError, NumericParseError, MetricEncodeError
"""

from importlib.metadata import PackageNotFoundError, version

from metricline.codec import (
    COMPACT_LAYOUT,
    PLACEHOLDER,
    SEPARATOR,
    VERBOSE_LAYOUT,
    FieldKind,
    FieldSpec,
    LineFormat,
    LineLayout,
    decode_compact,
    decode_line,
    decode_verbose,
    encode_compact,
    encode_verbose,
    populated_fields,
    sanitize_resource,
)
from metricline.config import ExporterConfig, OTLPConfig
from metricline.exceptions import (
    EmptyInputError,
    MalformedFormatError,
    MetricEncodeError,
    MetricFormatError,
    MetricLineError,
    NumericParseError,
)
from metricline.exporters import (
    InMemoryMetricExporter,
    LoggingMetricExporter,
    OTLPMetricExporter,
    PrometheusMetricExporter,
)
from metricline.models import GAUGE_FIELDS, MetricRecord
from metricline.protocols import (
    MetricExporter,
    MetricRecordRetriever,
    TimePredicate,
    time_range,
)
from metricline.storage import InMemoryRecordStore

try:
    __version__ = version("metricline")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "COMPACT_LAYOUT",
    "GAUGE_FIELDS",
    "PLACEHOLDER",
    "SEPARATOR",
    "VERBOSE_LAYOUT",
    "EmptyInputError",
    "ExporterConfig",
    "FieldKind",
    "FieldSpec",
    "InMemoryMetricExporter",
    "InMemoryRecordStore",
    "LineFormat",
    "LineLayout",
    "LoggingMetricExporter",
    "MalformedFormatError",
    "MetricEncodeError",
    "MetricExporter",
    "MetricFormatError",
    "MetricLineError",
    "MetricRecord",
    "MetricRecordRetriever",
    "NumericParseError",
    "OTLPConfig",
    "OTLPMetricExporter",
    "PrometheusMetricExporter",
    "TimePredicate",
    "__version__",
    "decode_compact",
    "decode_line",
    "decode_verbose",
    "encode_compact",
    "encode_verbose",
    "populated_fields",
    "sanitize_resource",
    "time_range",
]
