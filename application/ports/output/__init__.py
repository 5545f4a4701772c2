"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .location_source_port import ILocationSource, LocationErrorCode, LocationSourceError
from .location_resolver_port import ILocationResolver
from .forecast_provider_port import IForecastProvider
from .diagnostics_logger_port import IDiagnosticsLogger, NetworkEvent, NetworkLogEntry
