"""
Location Resolver - Resolução única (single-shot) da posição atual
Converte a assinatura por callbacks da plataforma em um future asyncio
"""
import asyncio
from typing import Optional

from ddtrace import tracer

from application.ports.output.location_resolver_port import ILocationResolver
from application.ports.output.location_source_port import ILocationSource
from domain.exceptions import LocationProviderException, LocationUnavailableException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.location.location_error_mapper import classify_location_error
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class LocationResolver(ILocationResolver):
    """
    Resolve a posição atual a partir de uma ILocationSource

    Características:
    - Solicita permissão na primeira resolução
    - Primeiro evento vence: a assinatura é encerrada imediatamente e
      eventos posteriores são ignorados
    - Callbacks podem vir de qualquer thread (call_soon_threadsafe)
    - Uma resolução pendente por instância (a assinatura é compartilhada)
    - Sem timeout por padrão: se o hardware nunca reportar uma posição,
      a chamada não termina. timeout_seconds opcional encerra com
      LocationUnavailableException.
    """

    def __init__(self, source: ILocationSource, timeout_seconds: Optional[float] = None):
        """
        Args:
            source: Fonte de localização da plataforma
            timeout_seconds: Timeout opcional da resolução (None = sem timeout)
        """
        self.source = source
        self.timeout_seconds = timeout_seconds
        self._permission_requested = False
        self._subscription: Optional[asyncio.Future] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def is_resolving(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def _stop_updates(self, future: asyncio.Future) -> None:
        # só a resolução dona da assinatura pode encerrá-la
        if self._subscription is not future:
            return
        self._subscription = None
        try:
            self.source.unsubscribe()
        except Exception as e:
            logger.warning("Failed to stop location updates", error=str(e))

    def _release(self, future: asyncio.Future) -> None:
        self._stop_updates(future)
        if self._pending is future:
            self._pending = None

    def _settle_fix(self, future: asyncio.Future, latitude: float, longitude: float) -> None:
        if future.done():
            return
        self._stop_updates(future)

        try:
            coordinates = Coordinates(latitude=latitude, longitude=longitude)
        except (TypeError, ValueError) as ex:
            future.set_exception(LocationProviderException(
                "Location source reported an invalid fix",
                cause=ex,
                details={"latitude": repr(latitude), "longitude": repr(longitude)}
            ))
            return

        logger.debug("Location fix received", latitude=latitude, longitude=longitude)
        future.set_result(coordinates)

    def _settle_error(self, future: asyncio.Future, error: BaseException) -> None:
        if future.done():
            return
        self._stop_updates(future)

        failure = classify_location_error(error)
        logger.warning("Location resolution failed", kind=failure.kind, error=str(error))
        future.set_exception(failure)

    @tracer.wrap(resource="location.resolve_current_location")
    async def resolve_current_location(self) -> Coordinates:
        """
        Resolve a posição atual (primeira posição reportada)

        Returns:
            Coordinates

        Raises:
            LocationPermissionDeniedException: Permissão negada
            LocationUnavailableException: Posição indisponível (ou timeout)
            LocationProviderException: Qualquer outro erro da plataforma
            RuntimeError: Se já existe uma resolução pendente nesta instância
        """
        if self.is_resolving:
            raise RuntimeError("A location resolution is already in progress on this resolver")

        loop = asyncio.get_running_loop()
        future = loop.create_future()
        self._pending = future

        def schedule(callback, *args) -> None:
            try:
                loop.call_soon_threadsafe(callback, future, *args)
            except RuntimeError:
                # Loop já encerrado: ninguém mais aguarda o resultado
                logger.debug("Late location event dropped")

        def on_fix(latitude: float, longitude: float) -> None:
            schedule(self._settle_fix, latitude, longitude)

        def on_error(error: BaseException) -> None:
            schedule(self._settle_error, error)

        try:
            if not self._permission_requested:
                self._permission_requested = True
                self.source.request_permission()

            self._subscription = future
            self.source.subscribe(on_fix, on_error)
        except Exception as ex:
            self._release(future)
            raise classify_location_error(ex) from ex

        try:
            if self.timeout_seconds is None:
                return await future
            try:
                return await asyncio.wait_for(future, timeout=self.timeout_seconds)
            except asyncio.TimeoutError as ex:
                raise LocationUnavailableException(
                    "Location fix not received in time",
                    details={"timeout_seconds": self.timeout_seconds}
                ) from ex
        finally:
            self._release(future)


def get_location_resolver(source: ILocationSource) -> LocationResolver:
    """Factory: resolver com o timeout opcional configurado no ambiente"""
    return LocationResolver(source=source, timeout_seconds=settings.LOCATION_TIMEOUT_SECONDS)
