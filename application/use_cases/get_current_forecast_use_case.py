"""
Async Use Case: Get Current Forecast
Location Resolver → Forecast Client → Series Transformer
"""
from typing import Optional

from ddtrace import tracer

from application.ports.input.get_current_forecast_port import IGetCurrentForecastUseCase
from application.ports.output.forecast_provider_port import IForecastProvider
from application.ports.output.location_resolver_port import ILocationResolver
from domain.entities.forecast_series import ForecastSeries
from domain.exceptions import AcquisitionException, FetchException, LocationException
from domain.services.series_transformer import SeriesTransformer
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetCurrentForecastUseCase(IGetCurrentForecastUseCase):
    """Async use case: hourly temperature series for the device's current position"""

    def __init__(
        self,
        location_resolver: ILocationResolver,
        forecast_provider: IForecastProvider
    ):
        self.location_resolver = location_resolver
        self.forecast_provider = forecast_provider

    @tracer.wrap(resource="use_case.get_current_forecast")
    async def execute(
        self,
        request_timeout_seconds: Optional[float] = None,
        resource_timeout_seconds: Optional[float] = None
    ) -> ForecastSeries:
        """
        Execute use case asynchronously

        Each call is an independent attempt: a retry re-runs the whole
        sequence starting from location resolution.

        Args:
            request_timeout_seconds: Per-request timeout (default: settings)
            resource_timeout_seconds: Per-resource timeout (default: settings)

        Returns:
            ForecastSeries (an empty series is a valid result)

        Raises:
            AcquisitionException: Wrapping the LocationException or
                FetchException unchanged
        """
        if request_timeout_seconds is None:
            request_timeout_seconds = settings.REQUEST_TIMEOUT_SECONDS
        if resource_timeout_seconds is None:
            resource_timeout_seconds = settings.RESOURCE_TIMEOUT_SECONDS

        # Location first; the forecast is never fetched without a coordinate
        try:
            coordinates = await self.location_resolver.resolve_current_location()
        except LocationException as ex:
            logger.warning("Current location not resolved", kind=ex.kind, error=ex.message)
            raise AcquisitionException(ex) from ex

        try:
            raw = await self.forecast_provider.fetch_forecast(
                coordinates,
                request_timeout_seconds=request_timeout_seconds,
                resource_timeout_seconds=resource_timeout_seconds
            )
        except FetchException as ex:
            logger.warning(
                "Forecast not fetched",
                kind=ex.kind,
                error=ex.message,
                provider=self.forecast_provider.provider_name
            )
            raise AcquisitionException(ex) from ex

        series = SeriesTransformer.to_series(raw)

        logger.info(
            "Current forecast acquired",
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
            points=len(series)
        )
        return series
