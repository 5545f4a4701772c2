"""
Input Port: Interface para obter a previsão horária da posição atual
"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.entities.forecast_series import ForecastSeries


class IGetCurrentForecastUseCase(ABC):
    """Interface para o caso de uso de previsão da posição atual"""

    @abstractmethod
    async def execute(
        self,
        request_timeout_seconds: Optional[float] = None,
        resource_timeout_seconds: Optional[float] = None
    ) -> ForecastSeries:
        """
        Resolve a posição atual, busca a previsão e monta a série

        Args:
            request_timeout_seconds: Timeout por requisição (padrão: settings)
            resource_timeout_seconds: Timeout da transferência (padrão: settings)

        Returns:
            ForecastSeries (vazia é um resultado válido)

        Raises:
            AcquisitionException: Envolvendo a falha de localização ou de busca
        """
        pass
