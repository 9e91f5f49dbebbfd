"""Storage interface shared by the memory and SQL backends."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from jokebook.domain.jokes import JokeRecord


class JokeRepository(ABC):
    """Category -> ordered jokes. Implementations keep registration/insertion order."""

    @abstractmethod
    def list_categories(self) -> list[str]:
        ...

    @abstractmethod
    def has_category(self, name: str) -> bool:
        ...

    @abstractmethod
    def add_category(self, name: str) -> None:
        """Register `name`; raises CategoryExistsError when already present."""

    @abstractmethod
    def list_jokes(self, category: str) -> list[JokeRecord]:
        ...

    @abstractmethod
    def add_joke(self, category: str, joke: str, response: str) -> JokeRecord:
        """Append a joke to an existing category and return the stored record."""

    @abstractmethod
    def count_by_category(self) -> dict[str, int]:
        ...

    @abstractmethod
    def iter_jokes(self) -> Iterator[tuple[str, JokeRecord]]:
        ...

    def has_jokes(self) -> bool:
        return any(self.count_by_category().values())
