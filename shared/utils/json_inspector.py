"""
JSON Inspector Utility
Serializes decoded values into readable text for diagnostics only.
Never used to decide success or failure of a fetch.
"""
import dataclasses
import json
from typing import Any, Optional

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class JsonInspector:
    """Readable JSON rendering of arbitrary decoded values"""

    @staticmethod
    def _to_jsonable(value: Any) -> Any:
        if isinstance(value, (bytes, bytearray)):
            return json.loads(value.decode('utf-8'))
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            if hasattr(value, 'to_dict'):
                return value.to_dict()
            return dataclasses.asdict(value)
        if hasattr(value, 'to_dict'):
            return value.to_dict()
        return value

    @staticmethod
    def to_pretty_json_string(value: Any, indent: Optional[int] = 2) -> Optional[str]:
        """
        Render a decoded value (dict, list, dataclass, raw JSON bytes) as JSON text

        Args:
            value: Value to render
            indent: Indentation (None for a compact single line)

        Returns:
            JSON string, or None when the value cannot be serialized
        """
        try:
            return json.dumps(
                JsonInspector._to_jsonable(value),
                indent=indent,
                ensure_ascii=False,
                sort_keys=True
            )
        except (TypeError, ValueError) as e:
            logger.debug("Value is not JSON serializable", error=str(e), value_type=type(value).__name__)
            return None
