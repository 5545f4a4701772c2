"""
Redaction helpers for network diagnostics
Nothing sensitive may reach a log entry: query params named in
Diagnostics.SENSITIVE_QUERY_PARAMS are removed from URLs and headers whose
name contains Diagnostics.SENSITIVE_HEADER_MARKER are dropped.
"""
import hashlib
from typing import Any, Dict, Mapping, Optional, Tuple

from yarl import URL

from domain.constants import Diagnostics


def sanitize_url(url: Any) -> str:
    """
    Remove sensitive query parameters from a URL

    Args:
        url: URL string or yarl.URL

    Returns:
        URL string without sensitive parameters. If the URL cannot be
        parsed, the whole query string is dropped.
    """
    raw = str(url)
    try:
        parsed = URL(raw)
    except (TypeError, ValueError):
        return raw.split('?', 1)[0]

    kept = [
        (key, value)
        for key, value in parsed.query.items()
        if key.lower() not in Diagnostics.SENSITIVE_QUERY_PARAMS
    ]
    return str(parsed.with_query(kept))


def sanitize_headers(headers: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop every header whose name contains 'auth' (Authorization, X-Auth-Token, ...)"""
    if not headers:
        return {}
    return {
        str(key): str(value)
        for key, value in headers.items()
        if Diagnostics.SENSITIVE_HEADER_MARKER not in str(key).lower()
    }


def format_byte_size(size: int) -> str:
    """Human readable size in KB/MB (decimal units)"""
    if size < 1000 * 1000:
        return f"{size / 1000:.1f} KB"
    return f"{size / (1000 * 1000):.1f} MB"


def content_fingerprint(data: bytes) -> Tuple[str, int]:
    """
    SHA-256 fingerprint of a response body

    Returns:
        Tuple (hash prefix, size in bytes)
    """
    digest = hashlib.sha256(data).hexdigest()
    return digest[:Diagnostics.FINGERPRINT_PREFIX_LENGTH], len(data)
