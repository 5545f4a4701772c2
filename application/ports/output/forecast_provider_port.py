"""Forecast Provider Port - Interface para o cliente de previsão horária"""
from abc import ABC, abstractmethod

from domain.entities.forecast_response import RawForecastResponse
from domain.value_objects.coordinates import Coordinates


class IForecastProvider(ABC):
    """
    Interface para provedores de previsão horária de temperatura.
    A aplicação usa apenas Open-Meteo, mas mantemos a interface
    para facilitar troca futura de fonte.
    """

    @abstractmethod
    async def fetch_forecast(
        self,
        coordinates: Coordinates,
        request_timeout_seconds: float = 15,
        resource_timeout_seconds: float = 60
    ) -> RawForecastResponse:
        """
        Busca a previsão horária para a coordenada

        Args:
            coordinates: Posição resolvida
            request_timeout_seconds: Timeout por requisição (conexão/leitura)
            resource_timeout_seconds: Timeout da transferência completa

        Returns:
            RawForecastResponse decodificada

        Raises:
            FetchException: InvalidRequest, Transport, InvalidResponse,
                EmptyBody ou DecodeFailed
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenMeteo')"""
        pass
