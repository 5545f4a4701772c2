"""
Configurações e fixtures compartilhadas para todos os testes
"""
import json
import os
import sys
import threading

# Tracing desligado nos testes (sem agent local)
os.environ.setdefault('DD_TRACE_ENABLED', 'false')

# Garantir que os pacotes da raiz estejam no PYTHONPATH
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from application.ports.output.location_source_port import ILocationSource, LocationErrorCode, LocationSourceError
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager


class FakeLocationSource(ILocationSource):
    """
    Fonte de localização controlada pelo teste

    Registra chamadas de permissão/assinatura e permite disparar
    posições e erros manualmente (inclusive de outra thread).
    """

    def __init__(self):
        self.permission_requests = 0
        self.subscribe_calls = 0
        self.unsubscribe_calls = 0
        self.on_fix = None
        self.on_error = None
        self.subscribed = threading.Event()

    def request_permission(self) -> None:
        self.permission_requests += 1

    def subscribe(self, on_fix, on_error) -> None:
        self.subscribe_calls += 1
        self.on_fix = on_fix
        self.on_error = on_error
        self.subscribed.set()

    def unsubscribe(self) -> None:
        self.unsubscribe_calls += 1

    def emit_fix(self, latitude: float, longitude: float) -> None:
        self.on_fix(latitude, longitude)

    def emit_error(self, code: LocationErrorCode, message: str = "") -> None:
        self.on_error(LocationSourceError(code, message))


class ImmediateLocationSource(FakeLocationSource):
    """Fonte que reporta um evento dentro do próprio subscribe()"""

    def __init__(self, fix=None, error_code: LocationErrorCode = None):
        super().__init__()
        self.fix = fix
        self.error_code = error_code

    def subscribe(self, on_fix, on_error) -> None:
        super().subscribe(on_fix, on_error)
        if self.error_code is not None:
            self.emit_error(self.error_code)
        else:
            self.emit_fix(*self.fix)


@pytest.fixture
def fake_location_source():
    return FakeLocationSource()


@pytest.fixture
def make_location_source():
    """
    Factory fixture para fontes que respondem imediatamente

    Usage:
        source = make_location_source(fix=(52.52, 13.41))
        source = make_location_source(error_code=LocationErrorCode.DENIED)
    """
    def _make(fix=(52.52, 13.41), error_code: LocationErrorCode = None) -> ImmediateLocationSource:
        return ImmediateLocationSource(fix=fix, error_code=error_code)

    return _make


@pytest.fixture
def openmeteo_payload():
    """Documento Open-Meteo com três horas consecutivas"""
    return {
        "latitude": 52.52,
        "longitude": 13.419998,
        "generationtime_ms": 0.05,
        "utc_offset_seconds": 0,
        "timezone": "GMT",
        "timezone_abbreviation": "GMT",
        "elevation": 38.0,
        "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
        "hourly": {
            "time": ["2025-01-01T00:00", "2025-01-01T01:00", "2025-01-01T02:00"],
            "temperature_2m": [1.5, 1.2, 0.9]
        }
    }


@pytest.fixture
def openmeteo_body(openmeteo_payload):
    return json.dumps(openmeteo_payload).encode('utf-8')


@pytest.fixture(autouse=True)
def reset_session_manager():
    """Cada teste começa sem singleton de sessão aiohttp"""
    AiohttpSessionManager.reset_instance()
    yield
    AiohttpSessionManager.reset_instance()
