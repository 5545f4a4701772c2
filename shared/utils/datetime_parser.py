"""
DateTime Parser Utility
Shared utility for parsing the hourly feed timestamps
"""
import re
from datetime import datetime, timezone

from domain.constants import Forecast
from domain.exceptions import InvalidDateTimeException


class DateTimeParser:
    """Parse timestamps from the Open-Meteo hourly feed"""

    TIMESTAMP_FORMAT = Forecast.TIMESTAMP_FORMAT
    # largura fixa: strptime sozinho aceita "2025-1-1T0:0"
    TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}", re.ASCII)

    @staticmethod
    def parse_feed_timestamp(value: str) -> datetime:
        """
        Parse a feed timestamp into an aware UTC datetime

        The feed carries no offset ("yyyy-MM-ddTHH:mm"). Requests are made
        without a timezone parameter, so the API answers in GMT and the
        value is interpreted as UTC.

        Args:
            value: Timestamp string (e.g. "2025-01-01T13:00")

        Returns:
            Datetime with tzinfo=UTC

        Raises:
            InvalidDateTimeException: If the value does not match the format

        Examples:
            >>> DateTimeParser.parse_feed_timestamp("2025-01-01T00:00")
            datetime(2025, 1, 1, 0, 0, tzinfo=timezone.utc)
        """
        if not isinstance(value, str):
            raise InvalidDateTimeException(
                "Timestamp must be a string",
                details={"value": repr(value)}
            )

        if not DateTimeParser.TIMESTAMP_PATTERN.fullmatch(value):
            raise InvalidDateTimeException(
                "Invalid timestamp format. Use YYYY-MM-DDTHH:MM",
                details={"value": value}
            )

        try:
            parsed = datetime.strptime(value, DateTimeParser.TIMESTAMP_FORMAT)
        except ValueError as e:
            raise InvalidDateTimeException(
                f"Invalid timestamp format. Use YYYY-MM-DDTHH:MM. Error: {str(e)}",
                details={"value": value}
            )

        return parsed.replace(tzinfo=timezone.utc)

    @staticmethod
    def to_epoch_seconds(value: str) -> float:
        """
        Parse a feed timestamp and convert it to seconds since epoch

        Raises:
            InvalidDateTimeException: If the value does not match the format
        """
        return DateTimeParser.parse_feed_timestamp(value).timestamp()
