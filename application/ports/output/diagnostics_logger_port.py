"""Diagnostics Logger Port - Capacidade injetável de log de rede"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class NetworkEvent(Enum):
    """Eventos registrados por tentativa de busca"""
    INVALID_URL = "invalid_url"
    REQUEST_SENT = "request_sent"
    TRANSPORT_ERROR = "transport_error"
    INVALID_RESPONSE = "invalid_response"
    RESPONSE_RECEIVED = "response_received"
    EMPTY_DATA = "empty_data"
    DATA_FINGERPRINT = "data_fingerprint"
    DECODE_SUCCESS = "decode_success"
    DECODE_FAILED = "decode_failed"


@dataclass(frozen=True)
class NetworkLogEntry:
    """
    Uma entrada de diagnóstico

    Os campos de `fields` já devem estar redigidos (sem parâmetros ou
    headers sensíveis) quando a entrada é criada.
    """
    event: NetworkEvent
    fields: Dict[str, Any] = field(default_factory=dict)
    latency: Optional[float] = None  # segundos


class IDiagnosticsLogger(ABC):
    """Interface do logger de diagnóstico de rede"""

    @property
    @abstractmethod
    def enabled(self) -> bool:
        pass

    @abstractmethod
    def log(self, entry: NetworkLogEntry) -> None:
        """Registra uma entrada; nunca deve lançar exceção para o chamador"""
        pass
