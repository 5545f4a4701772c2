"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .get_current_forecast_use_case import GetCurrentForecastUseCase

__all__ = [
    'GetCurrentForecastUseCase'
]
