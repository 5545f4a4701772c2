"""Location Resolver Port - Resolução única da posição atual"""
from abc import ABC, abstractmethod

from domain.value_objects.coordinates import Coordinates


class ILocationResolver(ABC):
    """Interface para resolver a posição atual do dispositivo (single-shot)"""

    @abstractmethod
    async def resolve_current_location(self) -> Coordinates:
        """
        Resolve a posição atual

        Returns:
            Coordinates da primeira posição recebida

        Raises:
            LocationException: PermissionDenied, Unavailable ou Provider
        """
        pass
