"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas das fontes de localização, do cliente
Open-Meteo e dos adaptadores de entrada (CLI, apresentação de falhas)
"""

from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.location import LocationResolver, get_location_resolver
from infrastructure.adapters.output.providers.openmeteo import (
    OpenMeteoForecastClient,
    get_openmeteo_forecast_client
)

__all__ = [
    'get_aiohttp_session_manager',
    'LocationResolver',
    'get_location_resolver',
    'OpenMeteoForecastClient',
    'get_openmeteo_forecast_client'
]
