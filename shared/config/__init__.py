"""Shared configuration"""
from .settings import REQUEST_TIMEOUT_SECONDS, RESOURCE_TIMEOUT_SECONDS, DIAGNOSTICS_ENABLED
from .logger_config import get_logger, logger

__all__ = ['REQUEST_TIMEOUT_SECONDS', 'RESOURCE_TIMEOUT_SECONDS', 'DIAGNOSTICS_ENABLED', 'get_logger', 'logger']
