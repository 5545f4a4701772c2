"""
Value Object: posição geográfica resolvida
Produzida pelo LocationResolver e consumida uma vez por busca de previsão
"""
import math
from dataclasses import dataclass


def _check_degrees(name: str, value: float, limit: float) -> None:
    if not math.isfinite(value) or abs(value) > limit:
        raise ValueError(f"Invalid {name}: {value!r} (expected finite degrees in [-{limit:g}, {limit:g}])")


@dataclass(frozen=True)
class Coordinates:
    """Par latitude/longitude em graus decimais (WGS84), validado na criação"""
    latitude: float
    longitude: float

    def __post_init__(self):
        _check_degrees("latitude", self.latitude, 90.0)
        _check_degrees("longitude", self.longitude, 180.0)

    def __str__(self) -> str:
        ns = "S" if self.latitude < 0 else "N"
        ew = "W" if self.longitude < 0 else "E"
        return f"{abs(self.latitude):.4f}°{ns}, {abs(self.longitude):.4f}°{ew}"
