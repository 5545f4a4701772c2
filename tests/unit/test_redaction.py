"""
Testes Unitários - Redação de URLs/headers para diagnóstico
"""
import hashlib

import pytest
from yarl import URL

from shared.utils.redaction import content_fingerprint, format_byte_size, sanitize_headers, sanitize_url


class TestSanitizeUrl:

    def test_removes_password_and_token(self):
        url = "https://api.example.com/v1/forecast?latitude=1.0&token=abc&password=s3cret&hourly=temperature_2m"

        result = sanitize_url(url)

        assert "abc" not in result
        assert "s3cret" not in result
        assert URL(result).query == {"latitude": "1.0", "hourly": "temperature_2m"}

    def test_parameter_names_are_case_insensitive(self):
        result = sanitize_url("https://api.example.com/?Token=abc&PASSWORD=x&keep=1")

        assert URL(result).query == {"keep": "1"}

    def test_other_parameters_are_kept(self):
        url = URL("https://api.open-meteo.com/v1/forecast").with_query(
            {"latitude": "52.52", "longitude": "13.41", "hourly": "temperature_2m"}
        )

        assert sanitize_url(url) == str(url)

    def test_url_without_query(self):
        assert sanitize_url("https://api.open-meteo.com/v1/forecast") == "https://api.open-meteo.com/v1/forecast"


class TestSanitizeHeaders:

    def test_drops_any_header_containing_auth(self):
        headers = {
            "Authorization": "Bearer x",
            "X-Auth-Token": "y",
            "proxy-authenticate": "z",
            "Accept": "application/json",
        }

        assert sanitize_headers(headers) == {"Accept": "application/json"}

    def test_none_headers(self):
        assert sanitize_headers(None) == {}


class TestFingerprint:

    def test_hash_prefix_and_size(self):
        data = b'{"latitude": 1}'

        digest, size = content_fingerprint(data)

        assert digest == hashlib.sha256(data).hexdigest()[:8]
        assert size == len(data)

    @pytest.mark.parametrize("size, expected", [
        (0, "0.0 KB"),
        (1500, "1.5 KB"),
        (2_500_000, "2.5 MB"),
    ])
    def test_format_byte_size(self, size, expected):
        assert format_byte_size(size) == expected
