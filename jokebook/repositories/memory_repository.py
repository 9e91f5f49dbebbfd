"""In-process backend: a dict of category -> list of records."""
from __future__ import annotations

import threading
from typing import Iterator

from jokebook.core.errors import CategoryExistsError, CategoryNotFoundError
from jokebook.domain.jokes import JokeRecord
from jokebook.repositories.base import JokeRepository


class MemoryRepository(JokeRepository):
    """Volatile storage; contents are lost when the process exits.

    Readers and writers share one lock; routes run in a threadpool.
    """

    def __init__(self) -> None:
        self._jokes: dict[str, list[JokeRecord]] = {}
        self._lock = threading.Lock()

    def list_categories(self) -> list[str]:
        with self._lock:
            return list(self._jokes)

    def has_category(self, name: str) -> bool:
        with self._lock:
            return name in self._jokes

    def add_category(self, name: str) -> None:
        with self._lock:
            if name in self._jokes:
                raise CategoryExistsError(f"category {name} already exists")
            self._jokes[name] = []

    def list_jokes(self, category: str) -> list[JokeRecord]:
        with self._lock:
            return list(self._jokes.get(category, ()))

    def add_joke(self, category: str, joke: str, response: str) -> JokeRecord:
        record = JokeRecord(joke=joke, response=response)
        with self._lock:
            bucket = self._jokes.get(category)
            if bucket is None:
                raise CategoryNotFoundError(f"unknown category {category}")
            bucket.append(record)
        return record

    def count_by_category(self) -> dict[str, int]:
        with self._lock:
            return {name: len(records) for name, records in self._jokes.items()}

    def iter_jokes(self) -> Iterator[tuple[str, JokeRecord]]:
        with self._lock:
            snapshot = [(name, list(records)) for name, records in self._jokes.items()]
        for name, records in snapshot:
            for record in records:
                yield name, record
