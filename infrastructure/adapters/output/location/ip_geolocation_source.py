"""
IP Geolocation Source - Posição aproximada a partir do IP público
Usa um endpoint no formato ip-api.com ({"status", "lat", "lon", "message"})
"""
import asyncio
from typing import Optional

import aiohttp

from application.ports.output.location_source_port import (
    ErrorCallback,
    FixCallback,
    ILocationSource,
    LocationErrorCode,
    LocationSourceError,
)
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    build_client_timeout,
    get_aiohttp_session_manager,
)
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class IpGeolocationSource(ILocationSource):
    """
    Fonte de localização baseada em geolocalização por IP

    subscribe() agenda uma única consulta HTTP no event loop corrente e
    retorna imediatamente; o resultado chega pelos callbacks.
    unsubscribe() cancela a consulta se ainda estiver em andamento.

    Erros:
    - Falha de transporte / HTTP != 200 → LocationErrorCode.NETWORK
    - status == "fail" ou lat/lon ausentes → LocationErrorCode.LOCATION_UNKNOWN
    """

    def __init__(
        self,
        url: Optional[str] = None,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        self.url = url or settings.IP_GEOLOCATION_URL
        self.session_manager = session_manager or get_aiohttp_session_manager()
        self._task: Optional[asyncio.Task] = None

    def request_permission(self) -> None:
        # Geolocalização por IP não passa por permissão do sistema
        return None

    def subscribe(self, on_fix: FixCallback, on_error: ErrorCallback) -> None:
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._lookup(on_fix, on_error))

    def unsubscribe(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def _lookup(self, on_fix: FixCallback, on_error: ErrorCallback) -> None:
        timeout = build_client_timeout(settings.REQUEST_TIMEOUT_SECONDS, settings.RESOURCE_TIMEOUT_SECONDS)
        try:
            session = await self.session_manager.get_session()
            async with session.get(
                self.url,
                params={'fields': 'status,message,lat,lon'},
                headers={'Accept': 'application/json'},
                timeout=timeout
            ) as response:
                if response.status != 200:
                    on_error(LocationSourceError(
                        LocationErrorCode.NETWORK,
                        f"IP geolocation returned HTTP {response.status}"
                    ))
                    return
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            on_error(LocationSourceError(LocationErrorCode.NETWORK, f"IP geolocation request failed: {ex}", cause=ex))
            return
        except ValueError as ex:
            on_error(LocationSourceError(LocationErrorCode.UNKNOWN, "IP geolocation returned invalid JSON", cause=ex))
            return

        if not isinstance(data, dict) or data.get('status') != 'success':
            message = data.get('message', 'lookup failed') if isinstance(data, dict) else 'lookup failed'
            on_error(LocationSourceError(LocationErrorCode.LOCATION_UNKNOWN, f"IP geolocation: {message}"))
            return

        latitude, longitude = data.get('lat'), data.get('lon')
        if latitude is None or longitude is None:
            on_error(LocationSourceError(LocationErrorCode.LOCATION_UNKNOWN, "IP geolocation returned no coordinates"))
            return

        logger.debug("IP geolocation resolved", latitude=latitude, longitude=longitude)
        on_fix(latitude, longitude)
