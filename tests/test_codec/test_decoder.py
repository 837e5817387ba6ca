"""Tests for the tolerant metric line decoders."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from metricline.codec.decoder import decode_compact, decode_line, decode_verbose
from metricline.codec.encoder import encode_compact, encode_verbose
from metricline.codec.fields import LineFormat
from metricline.exceptions import (
    EmptyInputError,
    MalformedFormatError,
    MetricFormatError,
    NumericParseError,
)
from metricline.models.record import MetricRecord
from tests.conftest import make_record

LEGACY_LINE = "1600000000000|2020-09-13 12:26:40.000|svc-a|10|2|8|0|15"
FULL_LINE = "1600000000000|2020-09-13 12:26:40.000|svc-a|10|2|8|0|15|1|3|0"


class TestDecodeVerbose:
    """decode_verbose across current and legacy line lengths."""

    def test_worked_example(self) -> None:
        assert decode_verbose(FULL_LINE) == make_record()

    def test_round_trip(self) -> None:
        record = make_record(
            resource="GET:/orders",
            timestamp=1_700_000_123_000,
            classification=-7,
            pass_qps=2**64 - 1,
            occupied_pass_qps=42,
            concurrency=2**32 - 1,
        )
        assert decode_verbose(encode_verbose(record)) == record

    def test_legacy_eight_fields_default_optional(self) -> None:
        record = decode_verbose(LEGACY_LINE)
        assert record.avg_rt == 15
        assert record.occupied_pass_qps == 0
        assert record.concurrency == 0
        assert record.classification == 0

    def test_nine_fields(self) -> None:
        record = decode_verbose(LEGACY_LINE + "|4")
        assert record.occupied_pass_qps == 4
        assert record.concurrency == 0
        assert record.classification == 0

    def test_ten_fields(self) -> None:
        record = decode_verbose(LEGACY_LINE + "|4|9")
        assert record.occupied_pass_qps == 4
        assert record.concurrency == 9
        assert record.classification == 0

    def test_all_optional_fields_recovered(self) -> None:
        record = decode_verbose(LEGACY_LINE + "|4|9|-2")
        assert (record.occupied_pass_qps, record.concurrency, record.classification) == (4, 9, -2)

    def test_extra_trailing_fields_ignored(self) -> None:
        assert decode_verbose(FULL_LINE + "|99|future") == make_record()

    def test_human_time_is_not_parsed(self) -> None:
        line = FULL_LINE.replace("2020-09-13 12:26:40.000", "not a date")
        assert decode_verbose(line).timestamp == 1_600_000_000_000

    def test_trailing_newline_tolerated(self) -> None:
        assert decode_verbose(FULL_LINE + "\n") == make_record()

    def test_resource_kept_verbatim(self) -> None:
        line = FULL_LINE.replace("svc-a", " spaced name ")
        assert decode_verbose(line).resource == " spaced name "

    def test_sanitized_resource_decodes_to_placeholder(self) -> None:
        line = encode_verbose(make_record(resource="a|b"))
        assert decode_verbose(line).resource == "a_b"

    def test_returns_frozen_record(self) -> None:
        record = MetricRecord.from_verbose_line(FULL_LINE)
        assert isinstance(record, MetricRecord)
        with pytest.raises(ValidationError):
            record.pass_qps = 1  # type: ignore[misc]

    def test_logs_defaulted_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="metricline.codec.decoder"):
            decode_verbose(LEGACY_LINE)
        assert "occupied_pass_qps, concurrency, classification" in caplog.text


class TestDecodeVerboseErrors:
    """Failures are raised, never returned as partial records."""

    def test_empty_string(self) -> None:
        with pytest.raises(EmptyInputError):
            decode_verbose("")

    @pytest.mark.parametrize("line", ["   ", "\t", "\n", "\r\n"])
    def test_blank_line(self, line: str) -> None:
        with pytest.raises(EmptyInputError):
            decode_verbose(line)

    def test_seven_fields_rejected(self) -> None:
        with pytest.raises(MalformedFormatError) as exc_info:
            decode_verbose("1600000000000|t|svc-a|10|2|8|0")
        assert exc_info.value.field_count == 7
        assert exc_info.value.minimum == 8

    def test_single_field_rejected(self) -> None:
        with pytest.raises(MalformedFormatError):
            decode_verbose("garbage")

    def test_non_numeric_pass_qps(self) -> None:
        line = "1600000000000|t|svc-a|abc|2|8|0|15|1|3|0"
        with pytest.raises(NumericParseError) as exc_info:
            decode_verbose(line)
        assert exc_info.value.field == "pass_qps"
        assert exc_info.value.position == 3
        assert exc_info.value.value == "abc"
        assert "pass_qps" in str(exc_info.value)

    @pytest.mark.parametrize(
        ("position", "field"),
        [
            (0, "timestamp"),
            (4, "block_qps"),
            (5, "complete_qps"),
            (6, "error_qps"),
            (7, "avg_rt"),
            (8, "occupied_pass_qps"),
            (9, "concurrency"),
            (10, "classification"),
        ],
    )
    def test_failing_field_is_named(self, position: int, field: str) -> None:
        parts = FULL_LINE.split("|")
        parts[position] = "x1"
        with pytest.raises(NumericParseError) as exc_info:
            decode_verbose("|".join(parts))
        assert exc_info.value.field == field

    @pytest.mark.parametrize("raw", ["-1", "+1", " 1", "1 ", "1_000", "1.5", "", "0x10"])
    def test_strict_unsigned_parsing(self, raw: str) -> None:
        parts = FULL_LINE.split("|")
        parts[3] = raw
        with pytest.raises(NumericParseError):
            decode_verbose("|".join(parts))

    def test_uint64_overflow(self) -> None:
        parts = FULL_LINE.split("|")
        parts[3] = str(2**64)
        with pytest.raises(NumericParseError, match="out of uint64 range"):
            decode_verbose("|".join(parts))

    def test_oversized_digit_string(self) -> None:
        line = "1600000000000|t|svc-a|" + "9" * 5000 + "|2|8|0|15"
        with pytest.raises(NumericParseError, match="out of uint64 range") as exc_info:
            decode_verbose(line)
        assert exc_info.value.field == "pass_qps"

    def test_oversized_signed_classification(self) -> None:
        with pytest.raises(NumericParseError) as exc_info:
            decode_verbose(LEGACY_LINE + "|0|0|-" + "1" * 5000)
        assert exc_info.value.field == "classification"

    def test_leading_zeros_accepted(self) -> None:
        parts = FULL_LINE.split("|")
        parts[3] = "0" * 30 + "10"
        assert decode_verbose("|".join(parts)).pass_qps == 10

    def test_concurrency_bounded_to_32_bits(self) -> None:
        with pytest.raises(NumericParseError) as exc_info:
            decode_verbose(LEGACY_LINE + f"|0|{2**32}")
        assert exc_info.value.field == "concurrency"

    def test_classification_bounded_to_signed_32_bits(self) -> None:
        with pytest.raises(NumericParseError):
            decode_verbose(LEGACY_LINE + f"|0|0|{2**31}")
        assert decode_verbose(LEGACY_LINE + f"|0|0|{-(2**31)}").classification == -(2**31)

    def test_signed_classification_accepts_plus(self) -> None:
        assert decode_verbose(LEGACY_LINE + "|0|0|+5").classification == 5

    def test_errors_share_base_class(self) -> None:
        for line in ("", "1|2", "x|t|r|1|1|1|1|1"):
            with pytest.raises(MetricFormatError):
                decode_verbose(line)


class TestDecodeCompact:
    """The compact decoder uses its own field positions."""

    def test_round_trip(self) -> None:
        record = make_record(classification=3)
        assert decode_compact(encode_compact(record)) == record

    def test_legacy_seven_fields(self) -> None:
        record = decode_compact("1600000000000|svc-a|10|2|8|0|15")
        assert record.avg_rt == 15
        assert record.occupied_pass_qps == 0

    def test_six_fields_rejected(self) -> None:
        with pytest.raises(MalformedFormatError) as exc_info:
            decode_compact("1600000000000|svc-a|10|2|8|0")
        assert exc_info.value.minimum == 7

    def test_verbose_line_is_not_compact(self) -> None:
        # Position 2 holds the resource in a verbose line.
        with pytest.raises(NumericParseError) as exc_info:
            decode_compact(FULL_LINE)
        assert exc_info.value.field == "pass_qps"


class TestDecodeLine:
    def test_dispatch_verbose(self) -> None:
        assert decode_line(FULL_LINE) == make_record()

    def test_dispatch_compact_by_name(self) -> None:
        line = encode_compact(make_record())
        assert decode_line(line, "compact") == make_record()

    def test_dispatch_enum(self) -> None:
        line = encode_compact(make_record())
        assert decode_line(line, LineFormat.COMPACT) == make_record()

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="not a valid LineFormat"):
            decode_line(FULL_LINE, "yaml")
