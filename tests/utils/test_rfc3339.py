"""Tests for strict RFC 3339 timestamp parsing."""

from datetime import UTC, datetime

import pytest

from firmware_descriptor.exceptions import ValidationException
from firmware_descriptor.utils.rfc3339 import parse_rfc3339


class TestParseRfc3339:
    """Tests for parse_rfc3339()."""

    def test_zulu_timestamp(self) -> None:
        """A 'Z' suffixed timestamp is UTC."""
        assert parse_rfc3339("2024-03-01T12:00:00Z") == datetime(2024, 3, 1, 12, tzinfo=UTC)

    def test_positive_offset_converted_to_utc(self) -> None:
        """Positive offsets are subtracted."""
        parsed = parse_rfc3339("2024-03-01T12:00:00+05:30")

        assert parsed == datetime(2024, 3, 1, 6, 30, tzinfo=UTC)
        assert parsed.tzinfo is UTC

    def test_negative_offset_crosses_midnight(self) -> None:
        """Negative offsets can move the date forward."""
        assert parse_rfc3339("2024-02-29T23:00:00-02:00") == datetime(
            2024, 3, 1, 1, tzinfo=UTC
        )

    @pytest.mark.parametrize(
        "text", ["2024-03-01t12:00:00z", "2024-03-01 12:00:00Z", "2024-03-01T12:00:00+00:00"]
    )
    def test_separator_and_case_variants(self, text: str) -> None:
        """Lower-case 't'/'z' and a space separator are accepted."""
        assert parse_rfc3339(text) == datetime(2024, 3, 1, 12, tzinfo=UTC)

    def test_fractional_seconds(self) -> None:
        """Fractions are kept to microsecond precision."""
        assert parse_rfc3339("2024-03-01T12:00:00.5Z").microsecond == 500000
        assert parse_rfc3339("2024-03-01T12:00:00.123456789Z").microsecond == 123456

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2024-03-01",
            "2024-03-01T12:00:00",
            "2024-03-01T12:00Z",
            "2024-3-1T12:00:00Z",
            "2024-03-01T12:00:00+0200",
            "2024-03-01T12:00:00.Z",
            "20240301T120000Z",
            " 2024-03-01T12:00:00Z",
            "2024-W09-5T12:00:00Z",
        ],
    )
    def test_malformed_text_rejected(self, text: str) -> None:
        """Text outside the RFC 3339 date-time production is rejected."""
        with pytest.raises(ValidationException, match="RFC 3339"):
            parse_rfc3339(text)

    @pytest.mark.parametrize(
        "text",
        [
            "2024-02-30T00:00:00Z",
            "2024-01-01T24:00:00Z",
            "2024-01-01T00:00:60Z",
            "2024-01-01T00:00:00+24:00",
            "0001-01-01T00:00:00+01:00",
        ],
    )
    def test_out_of_range_values_rejected(self, text: str) -> None:
        """Well-formed text with impossible values is rejected."""
        with pytest.raises(ValidationException):
            parse_rfc3339(text)
