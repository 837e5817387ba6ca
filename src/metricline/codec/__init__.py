"""Line codec: field layouts, encoders and tolerant decoders."""

from .decoder import decode_compact, decode_line, decode_verbose
from .encoder import encode_compact, encode_verbose, sanitize_resource
from .fields import (
    COMPACT_LAYOUT,
    PLACEHOLDER,
    SEPARATOR,
    VERBOSE_LAYOUT,
    FieldKind,
    FieldSpec,
    LineFormat,
    LineLayout,
    populated_fields,
)

__all__ = [
    "COMPACT_LAYOUT",
    "PLACEHOLDER",
    "SEPARATOR",
    "VERBOSE_LAYOUT",
    "FieldKind",
    "FieldSpec",
    "LineFormat",
    "LineLayout",
    "decode_compact",
    "decode_line",
    "decode_verbose",
    "encode_compact",
    "encode_verbose",
    "populated_fields",
    "sanitize_resource",
]
