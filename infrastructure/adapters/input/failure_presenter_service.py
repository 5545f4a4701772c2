"""
Failure Presenter Service
Centraliza a conversão de falhas de aquisição em prompts para o usuário
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from domain.exceptions import (
    AcquisitionException,
    DomainException,
    LocationPermissionDeniedException,
    LocationUnavailableException,
    LocationProviderException,
    InvalidRequestException,
    TransportException,
    InvalidResponseException,
    EmptyBodyException,
    DecodeFailedException,
)
from shared.config.logger_config import logger as app_logger

ACTION_OPEN_SETTINGS = "open_settings"
ACTION_RETRY = "retry"


@dataclass(frozen=True)
class FailurePrompt:
    """Prompt exibido ao usuário quando a aquisição falha"""
    kind: str
    title: str
    message: str
    action: str
    details: Optional[Dict[str, Any]] = None

    @property
    def retryable(self) -> bool:
        return self.action == ACTION_RETRY

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'title': self.title,
            'message': self.message,
            'action': self.action,
            'retryable': self.retryable,
            'details': self.details or {}
        }


class FailurePresenterService:
    """
    Service para centralizar a apresentação de falhas da aquisição
    Responsável por converter falhas tipadas em prompts com ação sugerida:
    permissão negada → abrir configurações; demais → tentar novamente
    (a nova tentativa reexecuta o fluxo inteiro, a partir da localização)
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            FailurePresenterService.logger = logger

    @staticmethod
    def present(ex: BaseException) -> FailurePrompt:
        """
        Converte uma falha em FailurePrompt

        Args:
            ex: AcquisitionException (ou a falha tipada que ela envolve)

        Returns:
            FailurePrompt
        """
        failure = ex.failure if isinstance(ex, AcquisitionException) else ex

        handlers = (
            (LocationPermissionDeniedException, FailurePresenterService.handle_permission_denied),
            (LocationUnavailableException, FailurePresenterService.handle_location_unavailable),
            (LocationProviderException, FailurePresenterService.handle_location_error),
            (InvalidRequestException, FailurePresenterService.handle_invalid_request),
            (TransportException, FailurePresenterService.handle_transport_error),
            (InvalidResponseException, FailurePresenterService.handle_invalid_response),
            (EmptyBodyException, FailurePresenterService.handle_empty_body),
            (DecodeFailedException, FailurePresenterService.handle_decode_failed),
        )
        for exception_class, handler in handlers:
            if isinstance(failure, exception_class):
                return handler(failure)

        return FailurePresenterService.handle_unexpected_error(failure)

    @staticmethod
    def handle_permission_denied(ex: LocationPermissionDeniedException) -> FailurePrompt:
        """Permissão de localização negada → abrir configurações"""
        FailurePresenterService.logger.warning("Location permission denied", error=str(ex), details=ex.details)
        return FailurePrompt(
            kind=ex.kind,
            title="Location access needed",
            message="Allow location access in Settings to see the forecast for where you are.",
            action=ACTION_OPEN_SETTINGS,
            details=ex.details
        )

    @staticmethod
    def handle_location_unavailable(ex: LocationUnavailableException) -> FailurePrompt:
        """Posição indisponível no momento"""
        FailurePresenterService.logger.warning("Location unavailable", error=str(ex), details=ex.details)
        return FailurePrompt(
            kind=ex.kind,
            title="Location unavailable",
            message="Your current location could not be determined. Try again in a moment.",
            action=ACTION_RETRY,
            details=ex.details
        )

    @staticmethod
    def handle_location_error(ex: LocationProviderException) -> FailurePrompt:
        """Erro genérico da plataforma de localização"""
        FailurePresenterService.logger.error("Location provider error", error=str(ex), details=ex.details)
        return FailurePrompt(
            kind=ex.kind,
            title="Location error",
            message="Something went wrong while finding your location.",
            action=ACTION_RETRY,
            details=ex.details
        )

    @staticmethod
    def handle_invalid_request(ex: InvalidRequestException) -> FailurePrompt:
        """Requisição não pôde ser montada (URL base / coordenadas)"""
        FailurePresenterService.logger.error("Invalid forecast request", error=str(ex), details=ex.details)
        return FailurePrompt(
            kind=ex.kind,
            title="Forecast unavailable",
            message="The forecast request could not be built.",
            action=ACTION_RETRY,
            details=ex.details
        )

    @staticmethod
    def handle_transport_error(ex: TransportException) -> FailurePrompt:
        """Falha de rede / timeout"""
        FailurePresenterService.logger.warning("Forecast transport error", error=str(ex), details=ex.details)
        return FailurePrompt(
            kind=ex.kind,
            title="No connection",
            message="The forecast service could not be reached. Check your connection and try again.",
            action=ACTION_RETRY,
            details=ex.details
        )

    @staticmethod
    def handle_invalid_response(ex: InvalidResponseException) -> FailurePrompt:
        """Resposta sem status HTTP válido"""
        FailurePresenterService.logger.error("Invalid forecast response", error=str(ex), details=ex.details)
        return FailurePrompt(
            kind=ex.kind,
            title="Forecast unavailable",
            message="The forecast service sent an unexpected response.",
            action=ACTION_RETRY,
            details=ex.details
        )

    @staticmethod
    def handle_empty_body(ex: EmptyBodyException) -> FailurePrompt:
        """Resposta sem corpo"""
        FailurePresenterService.logger.warning("Empty forecast body", error=str(ex), details=ex.details)
        return FailurePrompt(
            kind=ex.kind,
            title="Forecast unavailable",
            message="The forecast service returned no data.",
            action=ACTION_RETRY,
            details=ex.details
        )

    @staticmethod
    def handle_decode_failed(ex: DecodeFailedException) -> FailurePrompt:
        """Corpo não decodificável"""
        FailurePresenterService.logger.error("Forecast decode failed", error=str(ex), details=ex.details)
        return FailurePrompt(
            kind=ex.kind,
            title="Forecast unavailable",
            message="The forecast data could not be read.",
            action=ACTION_RETRY,
            details=ex.details
        )

    @staticmethod
    def handle_unexpected_error(ex: BaseException) -> FailurePrompt:
        """Falha não classificada"""
        FailurePresenterService.logger.error("Unexpected acquisition failure", error=str(ex), exc_info=True)
        details = ex.details if isinstance(ex, DomainException) else None
        return FailurePrompt(
            kind=getattr(ex, 'kind', 'unexpected_error'),
            title="Something went wrong",
            message="An unexpected error occurred.",
            action=ACTION_RETRY,
            details=details
        )
