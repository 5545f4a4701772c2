"""
Location Error Mapper - Classifica erros da plataforma de localização
Tabela única: código da plataforma → falha de domínio
"""
from typing import Dict, Type

from application.ports.output.location_source_port import LocationErrorCode, LocationSourceError
from domain.exceptions import (
    LocationException,
    LocationPermissionDeniedException,
    LocationProviderException,
    LocationUnavailableException,
)

# Códigos ausentes da tabela viram LocationProviderException (Other)
LOCATION_FAILURE_BY_CODE: Dict[LocationErrorCode, Type[LocationException]] = {
    LocationErrorCode.DENIED: LocationPermissionDeniedException,
    LocationErrorCode.PROMPT_DECLINED: LocationPermissionDeniedException,
    LocationErrorCode.LOCATION_UNKNOWN: LocationUnavailableException,
}

_MESSAGES = {
    LocationPermissionDeniedException: "Location permission denied",
    LocationUnavailableException: "Location currently unavailable",
}


def classify_location_error(error: BaseException) -> LocationException:
    """
    Converte o erro reportado pela fonte em LocationException

    Args:
        error: LocationSourceError ou qualquer outra exceção da plataforma

    Returns:
        LocationPermissionDeniedException, LocationUnavailableException ou
        LocationProviderException (com a causa original)
    """
    if isinstance(error, LocationException):
        return error

    if isinstance(error, LocationSourceError):
        failure_class = LOCATION_FAILURE_BY_CODE.get(error.code)
        details = {"code": error.code.value, "error": str(error)}
        if failure_class is not None:
            return failure_class(_MESSAGES[failure_class], details=details)
        return LocationProviderException(f"Location error: {error}", cause=error, details=details)

    return LocationProviderException(
        f"Location error: {error}",
        cause=error,
        details={"error": str(error), "error_type": type(error).__name__}
    )
