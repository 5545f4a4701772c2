"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass
from typing import List, Dict, Any

from domain.entities.forecast_series import ForecastSeries


@dataclass
class ForecastPointResponse:
    """Um ponto horário da série (instante em epoch seconds + temperatura)"""
    instant: float
    timestamp: str  # ISO 8601 (UTC)
    temperature: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'instant': self.instant,
            'timestamp': self.timestamp,
            'temperature': self.temperature
        }


@dataclass
class ForecastSeriesResponse:
    """Response com a série horária de temperatura da posição atual"""
    points: List[ForecastPointResponse]

    @staticmethod
    def from_series(series: ForecastSeries) -> 'ForecastSeriesResponse':
        """
        Converte ForecastSeries para DTO de resposta

        Args:
            series: ForecastSeries do domínio (ordem preservada)

        Returns:
            ForecastSeriesResponse DTO
        """
        return ForecastSeriesResponse(
            points=[
                ForecastPointResponse(
                    instant=point.instant,
                    timestamp=point.timestamp.isoformat(),
                    temperature=point.value
                )
                for point in series
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'count': len(self.points),
            'points': [point.to_dict() for point in self.points]
        }
