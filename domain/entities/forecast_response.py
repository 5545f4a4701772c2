"""
Forecast Response Entity - Documento horário decodificado da Open-Meteo
Decodificação tipada e tudo-ou-nada: qualquer campo ausente ou com tipo
errado invalida o documento inteiro
"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple


def _require(data: Dict[str, Any], key: str, path: str) -> Any:
    if not isinstance(data, dict):
        raise TypeError(f"{path or 'document'} must be an object, got {type(data).__name__}")
    if key not in data:
        raise KeyError(f"missing field '{path}{key}'")
    return data[key]


def _as_float(value: Any, field_name: str) -> float:
    # bool é subclasse de int, mas não é um número válido no JSON da API
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{field_name} must be a number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class RawHourly:
    """
    Séries horárias paralelas da resposta

    O índice i de `time` corresponde ao índice i de `temperature`.
    Se os tamanhos divergirem, apenas o prefixo comum é utilizável.
    """
    time: Tuple[str, ...]
    temperature: Tuple[float, ...]

    @property
    def usable_length(self) -> int:
        return min(len(self.time), len(self.temperature))

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'RawHourly':
        times = _require(data, 'time', 'hourly.')
        temps = _require(data, 'temperature_2m', 'hourly.')

        if not isinstance(times, list):
            raise TypeError("hourly.time must be an array")
        if not isinstance(temps, list):
            raise TypeError("hourly.temperature_2m must be an array")

        for i, value in enumerate(times):
            if not isinstance(value, str):
                raise TypeError(f"hourly.time[{i}] must be a string, got {type(value).__name__}")

        return cls(
            time=tuple(times),
            temperature=tuple(_as_float(v, f"hourly.temperature_2m[{i}]") for i, v in enumerate(temps))
        )


@dataclass(frozen=True)
class RawForecastResponse:
    """
    Resposta bruta da API /v1/forecast com hourly=temperature_2m

    Construída ao decodificar o corpo HTTP e descartada após a
    transformação em ForecastSeries.
    """
    latitude: float
    longitude: float
    hourly: RawHourly

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'RawForecastResponse':
        """
        Decodifica o JSON da Open-Meteo

        Args:
            data: Objeto JSON já desserializado

        Returns:
            RawForecastResponse

        Raises:
            KeyError: Campo obrigatório ausente
            TypeError: Campo com tipo inesperado
        """
        latitude = _as_float(_require(data, 'latitude', ''), 'latitude')
        longitude = _as_float(_require(data, 'longitude', ''), 'longitude')
        hourly = RawHourly.from_api_response(_require(data, 'hourly', ''))

        return cls(latitude=latitude, longitude=longitude, hourly=hourly)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'hourly': {
                'time': list(self.hourly.time),
                'temperature_2m': list(self.hourly.temperature)
            }
        }
