"""
Input Adapter: CLI (weather-series)
Presentation Layer: executa o use case uma vez e imprime JSON

Uso:
    weather-series                                  # posição via IP
    weather-series --latitude 52.52 --longitude 13.41
    weather-series --diagnostics --request-timeout 5
"""
import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional, Tuple

from application.dtos.responses import ForecastSeriesResponse
from application.ports.output.forecast_provider_port import IForecastProvider
from application.ports.output.location_source_port import ILocationSource
from application.use_cases.get_current_forecast_use_case import GetCurrentForecastUseCase
from domain.exceptions import AcquisitionException
from infrastructure.adapters.input.failure_presenter_service import FailurePresenterService
from infrastructure.adapters.output.diagnostics.network_event_logger import NetworkEventLogger
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.location.ip_geolocation_source import IpGeolocationSource
from infrastructure.adapters.output.location.location_resolver import get_location_resolver
from infrastructure.adapters.output.location.static_location_source import StaticLocationSource
from infrastructure.adapters.output.providers.openmeteo.openmeteo_forecast_client import (
    OpenMeteoForecastClient,
    get_openmeteo_forecast_client,
)
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger()

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='weather-series',
        description='Hourly temperature forecast for the current location (Open-Meteo)'
    )
    parser.add_argument('--latitude', type=float, help='Fixed latitude (requires --longitude)')
    parser.add_argument('--longitude', type=float, help='Fixed longitude (requires --latitude)')
    parser.add_argument('--diagnostics', action='store_true', help='Log redacted network diagnostics')
    parser.add_argument(
        '--request-timeout',
        type=float,
        default=settings.REQUEST_TIMEOUT_SECONDS,
        help='Per-request timeout in seconds (default: %(default)s)'
    )
    parser.add_argument(
        '--resource-timeout',
        type=float,
        default=settings.RESOURCE_TIMEOUT_SECONDS,
        help='Per-resource timeout in seconds (default: %(default)s)'
    )
    return parser


def build_location_source(args: argparse.Namespace) -> ILocationSource:
    """Posição fixa quando informada; caso contrário geolocalização por IP"""
    if args.latitude is not None and args.longitude is not None:
        return StaticLocationSource(latitude=args.latitude, longitude=args.longitude)
    return IpGeolocationSource()


def build_forecast_provider(args: argparse.Namespace) -> IForecastProvider:
    """--diagnostics força o log de rede; sem a flag vale DIAGNOSTICS_ENABLED (cliente compartilhado)"""
    if args.diagnostics:
        return OpenMeteoForecastClient(diagnostics=NetworkEventLogger(enabled=True))
    return get_openmeteo_forecast_client()


def build_use_case(args: argparse.Namespace) -> GetCurrentForecastUseCase:
    return GetCurrentForecastUseCase(
        location_resolver=get_location_resolver(build_location_source(args)),
        forecast_provider=build_forecast_provider(args)
    )


async def run(args: argparse.Namespace) -> Tuple[int, Dict[str, Any]]:
    """
    Executa uma tentativa completa de aquisição

    Returns:
        (exit code, payload JSON)
    """
    use_case = build_use_case(args)
    try:
        series = await use_case.execute(
            request_timeout_seconds=args.request_timeout,
            resource_timeout_seconds=args.resource_timeout
        )
    except AcquisitionException as ex:
        prompt = FailurePresenterService.present(ex)
        return EXIT_FAILURE, {'error': prompt.to_dict()}
    finally:
        # 🔌 Libera o pool de conexões antes do loop encerrar
        await get_aiohttp_session_manager().cleanup()

    return EXIT_OK, ForecastSeriesResponse.from_series(series).to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.latitude is None) != (args.longitude is None):
        parser.error('--latitude and --longitude must be given together')

    exit_code, payload = asyncio.run(run(args))
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
