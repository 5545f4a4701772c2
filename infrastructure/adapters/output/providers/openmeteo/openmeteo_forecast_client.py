"""Open-Meteo Forecast Client - Busca da previsão horária de temperatura"""

import asyncio
import time
from typing import Any, Optional

import aiohttp
from ddtrace import tracer
from yarl import URL

from application.ports.output.diagnostics_logger_port import (
    IDiagnosticsLogger,
    NetworkEvent,
    NetworkLogEntry,
)
from application.ports.output.forecast_provider_port import IForecastProvider
from domain.constants import API
from domain.entities.forecast_response import RawForecastResponse
from domain.exceptions import (
    DecodeFailedException,
    EmptyBodyException,
    FetchException,
    InvalidRequestException,
    InvalidResponseException,
    TransportException,
)
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.diagnostics.network_event_logger import NetworkEventLogger
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    build_client_timeout,
    get_aiohttp_session_manager,
)
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoResponseMapper
from shared.config import settings
from shared.config.logger_config import get_logger
from shared.utils.json_inspector import JsonInspector
from shared.utils.redaction import content_fingerprint, format_byte_size, sanitize_headers, sanitize_url
from shared.utils.validators import ForecastRequestValidator, GenericValidator

logger = get_logger(child=True)


class OpenMeteoForecastClient(IForecastProvider):
    """
    Cliente para a Open-Meteo Forecast API (hourly=temperature_2m)

    Características:
    - Uma única requisição GET por chamada, sem retries
    - Dois timeouts: por requisição (conexão/leitura) e por recurso (total)
    - Classificação de falhas: InvalidRequest, Transport, InvalidResponse,
      EmptyBody, DecodeFailed
    - Diagnóstico opcional com URL/headers redigidos e fingerprint do corpo
    - Sem estado mutável entre chamadas (buscas concorrentes são seguras)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session_manager: Optional[AiohttpSessionManager] = None,
        diagnostics: Optional[IDiagnosticsLogger] = None
    ):
        """
        Inicializa o cliente

        Args:
            base_url: Endpoint /v1/forecast (padrão: settings)
            session_manager: Gerenciador de sessão aiohttp (usa factory se None)
            diagnostics: Logger de diagnóstico (padrão: NetworkEventLogger)
        """
        self.base_url = base_url or settings.OPENMETEO_FORECAST_URL
        self.session_manager = session_manager or get_aiohttp_session_manager()
        self.diagnostics = diagnostics or NetworkEventLogger()

    @property
    def provider_name(self) -> str:
        return "OpenMeteo"

    def _log(self, event: NetworkEvent, latency: Optional[float] = None, **fields) -> None:
        self.diagnostics.log(NetworkLogEntry(event=event, fields=fields, latency=latency))

    @staticmethod
    def _is_http_response(response: Any) -> bool:
        status = getattr(response, 'status', None)
        return isinstance(status, int) and not isinstance(status, bool) and 100 <= status <= 599

    def build_request_url(self, coordinates: Coordinates) -> URL:
        """
        Monta a URL de consulta

        GET {base_url}?latitude={lat}&longitude={lon}&hourly=temperature_2m

        Raises:
            InvalidRequestException: URL base malformada ou coordenada inválida
        """
        try:
            base = ForecastRequestValidator.validate_base_url(self.base_url)
            ForecastRequestValidator.validate_latitude(coordinates.latitude)
            ForecastRequestValidator.validate_longitude(coordinates.longitude)
            return base.with_query(OpenMeteoResponseMapper.build_query_params(coordinates))
        except InvalidRequestException as ex:
            self._log(NetworkEvent.INVALID_URL, url=sanitize_url(self.base_url), error=ex.message)
            raise

    @tracer.wrap(resource="openmeteo.fetch_forecast")
    async def fetch_forecast(
        self,
        coordinates: Coordinates,
        request_timeout_seconds: float = API.REQUEST_TIMEOUT,
        resource_timeout_seconds: float = API.RESOURCE_TIMEOUT
    ) -> RawForecastResponse:
        """
        Busca a previsão horária da coordenada

        Flow:
        1. Monta a URL (falha → InvalidRequest, sem chamada de rede)
        2. GET com Accept: application/json e os dois timeouts
        3. Valida a resposta HTTP (InvalidResponse)
        4. Corpo vazio → EmptyBody
        5. Decodifica (DecodeFailed em qualquer erro)

        Args:
            coordinates: Posição resolvida
            request_timeout_seconds: Timeout por requisição (padrão 15s)
            resource_timeout_seconds: Timeout do recurso (padrão 60s)

        Returns:
            RawForecastResponse

        Raises:
            FetchException: Uma das cinco falhas classificadas
        """
        for value, name in (
            (request_timeout_seconds, "request_timeout_seconds"),
            (resource_timeout_seconds, "resource_timeout_seconds"),
        ):
            GenericValidator.validate_positive(value, name, exception_class=InvalidRequestException)

        url = self.build_request_url(coordinates)
        headers = {'Accept': API.ACCEPT_HEADER}
        timeout = build_client_timeout(request_timeout_seconds, resource_timeout_seconds)

        self._log(
            NetworkEvent.REQUEST_SENT,
            url=sanitize_url(url),
            method="GET",
            headers=sanitize_headers(headers)
        )

        # 📡 Requisição única, sem retry
        started = time.monotonic()
        try:
            session = await self.session_manager.get_session()
            async with session.get(url, headers=headers, timeout=timeout) as response:
                if not self._is_http_response(response):
                    self._log(NetworkEvent.INVALID_RESPONSE, latency=time.monotonic() - started)
                    raise InvalidResponseException(
                        "Reply is not a valid HTTP response",
                        details={"url": sanitize_url(url)}
                    )

                status = response.status
                self._log(
                    NetworkEvent.RESPONSE_RECEIVED,
                    latency=time.monotonic() - started,
                    status=status,
                    headers=sanitize_headers(getattr(response, 'headers', None))
                )
                body = await response.read()

        except FetchException:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            latency = time.monotonic() - started
            self._log(
                NetworkEvent.TRANSPORT_ERROR,
                latency=latency,
                error=str(ex) or type(ex).__name__,
                error_type=type(ex).__name__
            )
            raise TransportException(
                f"Forecast request failed: {type(ex).__name__}",
                cause=ex,
                details={"url": sanitize_url(url), "latency_seconds": round(latency, 3)}
            ) from ex

        latency = time.monotonic() - started

        # 📭 Corpo vazio é verificado antes da decodificação
        if not body:
            self._log(NetworkEvent.EMPTY_DATA, latency=latency, status=status)
            raise EmptyBodyException(
                "Forecast response body is empty",
                details={"status": status}
            )

        digest, size = content_fingerprint(body)
        self._log(
            NetworkEvent.DATA_FINGERPRINT,
            latency=latency,
            sha256=digest,
            bytes=size,
            size=format_byte_size(size)
        )

        try:
            raw = OpenMeteoResponseMapper.map_body_to_response(body)
        except DecodeFailedException as ex:
            ex.details.setdefault("status", status)
            self._log(NetworkEvent.DECODE_FAILED, latency=latency, status=status, error=ex.message)
            raise

        if self.diagnostics.enabled:
            self._log(
                NetworkEvent.DECODE_SUCCESS,
                latency=latency,
                points=raw.hourly.usable_length,
                body=JsonInspector.to_pretty_json_string(raw)
            )

        logger.debug(
            "Forecast fetched",
            status=status,
            hours=raw.hourly.usable_length,
            latency_seconds=round(latency, 3)
        )
        return raw


# Factory singleton
_client_instance: Optional[OpenMeteoForecastClient] = None


def get_openmeteo_forecast_client() -> OpenMeteoForecastClient:
    """Factory para obter singleton do cliente"""
    global _client_instance

    if _client_instance is None:
        _client_instance = OpenMeteoForecastClient()

    return _client_instance
