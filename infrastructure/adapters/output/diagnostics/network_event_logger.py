"""
Network Event Logger - Log estruturado de cada tentativa de busca
Desligado por padrão (DIAGNOSTICS_ENABLED); quando desligado é no-op
"""
from typing import Optional

from aws_lambda_powertools import Logger

from application.ports.output.diagnostics_logger_port import (
    IDiagnosticsLogger,
    NetworkEvent,
    NetworkLogEntry,
)
from shared.config import settings
from shared.config.logger_config import get_logger

_MESSAGES = {
    NetworkEvent.INVALID_URL: "Invalid forecast URL",
    NetworkEvent.REQUEST_SENT: "Forecast request sent",
    NetworkEvent.TRANSPORT_ERROR: "Transport error",
    NetworkEvent.INVALID_RESPONSE: "Invalid response: not an HTTP response",
    NetworkEvent.RESPONSE_RECEIVED: "Forecast response received",
    NetworkEvent.EMPTY_DATA: "Empty response body",
    NetworkEvent.DATA_FINGERPRINT: "Response fingerprint",
    NetworkEvent.DECODE_SUCCESS: "Forecast decoded",
    NetworkEvent.DECODE_FAILED: "Forecast decode failed",
}

_ERROR_EVENTS = {
    NetworkEvent.INVALID_URL,
    NetworkEvent.TRANSPORT_ERROR,
    NetworkEvent.INVALID_RESPONSE,
    NetworkEvent.EMPTY_DATA,
    NetworkEvent.DECODE_FAILED,
}


class NetworkEventLogger(IDiagnosticsLogger):
    """
    Implementação do logger de diagnóstico sobre o Powertools Logger

    Recebe entradas já redigidas e as emite como log estruturado
    (event, latency_seconds + campos da entrada). Falhas do próprio
    logging nunca chegam ao chamador.
    """

    def __init__(self, logger: Optional[Logger] = None, enabled: Optional[bool] = None):
        self._logger = logger or get_logger(child=True)
        self._enabled = settings.DIAGNOSTICS_ENABLED if enabled is None else enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def log(self, entry: NetworkLogEntry) -> None:
        if not self._enabled:
            return

        extra = dict(entry.fields)
        extra['event'] = entry.event.value
        if entry.latency is not None:
            extra['latency_seconds'] = round(entry.latency, 3)

        message = _MESSAGES.get(entry.event, entry.event.value)
        try:
            if entry.event in _ERROR_EVENTS:
                self._logger.warning(message, **extra)
            else:
                self._logger.info(message, **extra)
        except Exception as e:  # diagnostics never affect the fetch result
            self._logger.debug("Diagnostics entry dropped", error=str(e), event=entry.event.value)
