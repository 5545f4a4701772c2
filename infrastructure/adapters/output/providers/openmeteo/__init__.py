"""Open-Meteo Provider Package"""

from infrastructure.adapters.output.providers.openmeteo.openmeteo_forecast_client import (
    OpenMeteoForecastClient,
    get_openmeteo_forecast_client
)

__all__ = ['OpenMeteoForecastClient', 'get_openmeteo_forecast_client']
