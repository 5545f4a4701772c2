"""Open-Meteo mappers"""
from .openmeteo_response_mapper import OpenMeteoResponseMapper

__all__ = ['OpenMeteoResponseMapper']
