"""
Forecast Series Entity - Série temporal pronta para gráfico
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Iterator, List, Tuple


@dataclass(frozen=True)
class ForecastPoint:
    """
    Um ponto da série: instante (segundos desde epoch) e temperatura (°C)
    """
    instant: float
    value: float

    @property
    def timestamp(self) -> datetime:
        """Instante como datetime UTC"""
        return datetime.fromtimestamp(self.instant, tz=timezone.utc)

    def to_dict(self) -> dict:
        return {
            'instant': self.instant,
            'timestamp': self.timestamp.isoformat(),
            'value': self.value
        }


class ForecastSeries:
    """
    Sequência ordenada e somente-leitura de ForecastPoint

    A ordem é a do feed de origem: nenhuma ordenação ou deduplicação é
    feita, então a série só é monotônica se o feed também for.
    Uma série vazia é um resultado válido.
    """

    __slots__ = ('_points',)

    def __init__(self, points: Iterable[ForecastPoint] = ()):
        self._points: Tuple[ForecastPoint, ...] = tuple(points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ForecastPoint]:
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ForecastSeries):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"ForecastSeries({list(self._points)!r})"

    @property
    def points(self) -> Tuple[ForecastPoint, ...]:
        return self._points

    @property
    def is_empty(self) -> bool:
        return not self._points

    def instants(self) -> List[float]:
        return [p.instant for p in self._points]

    def values(self) -> List[float]:
        return [p.value for p in self._points]
