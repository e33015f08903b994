"""Ports (interfaces) for the hexagonal architecture."""

from abc import ABC, abstractmethod
from datetime import datetime

from src.domain.model import CatalogLoadResult, Song


class CatalogPort(ABC):
    @abstractmethod
    def load(self) -> CatalogLoadResult:
        ...

    @abstractmethod
    def append_setlist(self, songs: list[Song], saved_at: datetime) -> str:
        ...


class ConfigPort(ABC):
    @abstractmethod
    def load(self) -> dict:
        ...
