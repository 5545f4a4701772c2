"""
Domain Constants - Constantes da aplicação centralizadas
Valores fixos do contrato com a API e dos limites de HTTP
"""


class API:
    """Constantes de APIs externas"""

    # Open-Meteo
    OPENMETEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
    HOURLY_VARIABLE = "temperature_2m"
    ACCEPT_HEADER = "application/json"

    # Timeouts e limites HTTP
    REQUEST_TIMEOUT = 15  # segundos, entre pacotes (conexão e leitura)
    RESOURCE_TIMEOUT = 60  # segundos, transferência completa
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos

    # Geolocalização por IP (ip-api.com, sem chave)
    IP_GEOLOCATION_URL = "http://ip-api.com/json"


class Forecast:
    """Constantes do formato dos dados horários"""

    # Formato fixo do feed horário, sem offset (ex: "2025-01-01T13:00")
    TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"


class Diagnostics:
    """Constantes de redação para logs de rede"""

    SENSITIVE_QUERY_PARAMS = ("password", "token")
    SENSITIVE_HEADER_MARKER = "auth"
    FINGERPRINT_PREFIX_LENGTH = 8
