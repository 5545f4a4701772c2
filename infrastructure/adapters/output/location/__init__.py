"""Location adapters: resolver, error classification and sources"""
from .location_error_mapper import LOCATION_FAILURE_BY_CODE, classify_location_error
from .location_resolver import LocationResolver, get_location_resolver
from .static_location_source import StaticLocationSource
from .ip_geolocation_source import IpGeolocationSource

__all__ = [
    'LOCATION_FAILURE_BY_CODE',
    'classify_location_error',
    'LocationResolver',
    'get_location_resolver',
    'StaticLocationSource',
    'IpGeolocationSource'
]
