"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/openmeteo/mappers/openmeteo_response_mapper.py
"""

from domain.services.series_transformer import SeriesTransformer, to_series

__all__ = ['SeriesTransformer', 'to_series']
