"""Application DTOs - Data Transfer Objects para contratos de saída"""

from application.dtos.responses import (
    ForecastPointResponse,
    ForecastSeriesResponse
)

__all__ = [
    'ForecastPointResponse',
    'ForecastSeriesResponse'
]
