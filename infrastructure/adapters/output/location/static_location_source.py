"""Static Location Source - Posição fixa (CLI, quiosques, testes)"""
from application.ports.output.location_source_port import ErrorCallback, FixCallback, ILocationSource


class StaticLocationSource(ILocationSource):
    """Fonte que entrega sempre a mesma posição; não exige permissão"""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        self.active = False

    def request_permission(self) -> None:
        return None

    def subscribe(self, on_fix: FixCallback, on_error: ErrorCallback) -> None:
        self.active = True
        on_fix(self.latitude, self.longitude)

    def unsubscribe(self) -> None:
        self.active = False
