"""Location Source Port - Capacidade de localização fornecida pela plataforma"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional


class LocationErrorCode(Enum):
    """Códigos de erro reportados pela plataforma de localização"""
    LOCATION_UNKNOWN = "location_unknown"
    DENIED = "denied"
    PROMPT_DECLINED = "prompt_declined"
    NETWORK = "network"
    HEADING_FAILURE = "heading_failure"
    UNKNOWN = "unknown"


class LocationSourceError(Exception):
    """Erro reportado pela plataforma através do callback on_error"""

    def __init__(self, code: LocationErrorCode, message: str = "", cause: Optional[BaseException] = None):
        super().__init__(message or code.value)
        self.code = code
        self.cause = cause


FixCallback = Callable[[float, float], None]
ErrorCallback = Callable[[BaseException], None]


class ILocationSource(ABC):
    """
    Interface da fonte de localização (hardware, GPS, IP, estática)

    O núcleo só observa os dois callbacks; a fonte pode chamá-los a partir
    de qualquer thread.
    """

    @abstractmethod
    def request_permission(self) -> None:
        """
        Solicita permissão de localização em tempo de execução

        Não faz nada se a permissão já foi concedida. Uma negação é
        reportada depois via on_error com LocationErrorCode.DENIED.
        """
        pass

    @abstractmethod
    def subscribe(self, on_fix: FixCallback, on_error: ErrorCallback) -> None:
        """
        Inicia as atualizações de localização

        Args:
            on_fix: Chamado com (latitude, longitude) a cada posição
            on_error: Chamado com LocationSourceError (ou outra exceção)
        """
        pass

    @abstractmethod
    def unsubscribe(self) -> None:
        """Encerra as atualizações de localização"""
        pass
