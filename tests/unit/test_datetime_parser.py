"""
Testes Unitários - DateTimeParser
"""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../../'))

import pytest
from datetime import datetime, timezone

from shared.utils.datetime_parser import DateTimeParser
from domain.exceptions import InvalidDateTimeException


class TestDateTimeParser:
    """Testes para DateTimeParser"""

    def test_parse_feed_timestamp(self):
        """Testa parsing do formato do feed horário"""
        result = DateTimeParser.parse_feed_timestamp("2025-11-27T15:30")

        assert isinstance(result, datetime)
        assert result.year == 2025
        assert result.month == 11
        assert result.day == 27
        assert result.hour == 15
        assert result.minute == 30
        assert result.tzinfo == timezone.utc

    def test_to_epoch_seconds(self):
        """Timestamp interpretado como UTC"""
        assert DateTimeParser.to_epoch_seconds("2025-01-01T00:00") == 1735689600.0
        assert DateTimeParser.to_epoch_seconds("1970-01-01T01:00") == 3600.0

    def test_consecutive_hours_differ_by_3600(self):
        a = DateTimeParser.to_epoch_seconds("2024-12-31T23:00")
        b = DateTimeParser.to_epoch_seconds("2025-01-01T00:00")

        assert b - a == 3600.0

    @pytest.mark.parametrize("value", [
        "2025-01-01",
        "2025-01-01T00:00:00",
        "2025-01-01T00:00Z",
        "2025-13-01T00:00",
        "2025-01-01 00:00",
        "2025-1-1T0:0",
        "2025-01-01T0:00",
        " 2025-01-01T00:00",
        "not-a-date",
        "",
    ])
    def test_invalid_format(self, value):
        """Testa exceção com formatos diferentes de yyyy-MM-ddTHH:mm"""
        with pytest.raises(InvalidDateTimeException) as exc_info:
            DateTimeParser.parse_feed_timestamp(value)

        assert "Invalid timestamp format" in str(exc_info.value)
        assert exc_info.value.details["value"] == value

    def test_non_string_value(self):
        with pytest.raises(InvalidDateTimeException, match="must be a string"):
            DateTimeParser.parse_feed_timestamp(None)
