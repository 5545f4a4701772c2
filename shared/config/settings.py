"""
Configurações centralizadas da aplicação
Valores lidos do ambiente com defaults de domain.constants
"""
import os

from domain.constants import API


def _optional_float(name: str):
    value = os.environ.get(name, '').strip()
    return float(value) if value else None


# API de previsão (Open-Meteo não requer chave)
OPENMETEO_FORECAST_URL = os.environ.get('OPENMETEO_FORECAST_URL', API.OPENMETEO_FORECAST_URL)

# Timeouts HTTP (segundos)
REQUEST_TIMEOUT_SECONDS = float(os.environ.get('REQUEST_TIMEOUT_SECONDS', str(API.REQUEST_TIMEOUT)))
RESOURCE_TIMEOUT_SECONDS = float(os.environ.get('RESOURCE_TIMEOUT_SECONDS', str(API.RESOURCE_TIMEOUT)))

# Pool de conexões
HTTP_CONNECTION_LIMIT = int(os.environ.get('HTTP_CONNECTION_LIMIT', str(API.HTTP_CONNECTION_LIMIT)))
HTTP_CONNECTION_LIMIT_PER_HOST = int(
    os.environ.get('HTTP_CONNECTION_LIMIT_PER_HOST', str(API.HTTP_CONNECTION_LIMIT_PER_HOST))
)

# Diagnóstico de rede: desligado por padrão (produção)
DIAGNOSTICS_ENABLED = os.environ.get('DIAGNOSTICS_ENABLED', 'false').lower() in ('true', '1', 'yes')

# Localização
# Sem timeout por padrão; quando definido, expira como LocationUnavailable
LOCATION_TIMEOUT_SECONDS = _optional_float('LOCATION_TIMEOUT_SECONDS')
IP_GEOLOCATION_URL = os.environ.get('IP_GEOLOCATION_URL', API.IP_GEOLOCATION_URL)
