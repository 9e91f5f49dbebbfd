"""Joke store use cases (random pick, append, stats, search, seeding)."""

from __future__ import annotations

import random
from typing import Any, Mapping, Optional, Sequence

from jokebook.core.errors import CategoryNotFoundError, JokeValidationError
from jokebook.core.logging import get_logger
from jokebook.domain.jokes import (
    JokeRecord,
    is_valid_category_name,
    matches_term,
    normalize_text,
)
from jokebook.repositories.base import JokeRepository

logger = get_logger(__name__)


class JokeStore:
    """Owns all category -> joke associations behind a single repository.

    The public contract is identical whichever backend is passed in; backend
    faults surface as StorageError from the repository.
    """

    def __init__(self, repository: JokeRepository, rng: Optional[random.Random] = None) -> None:
        self.repository = repository
        self._rng = rng or random.Random()

    def list_categories(self) -> list[str]:
        return self.repository.list_categories()

    def random_joke(self, category: str) -> JokeRecord:
        jokes = self.repository.list_jokes(category) if self.repository.has_category(category) else []
        if not jokes:
            raise CategoryNotFoundError(f"no jokes for category {category}")
        return self._rng.choice(jokes)

    def add_joke(self, category: str, joke: Any, response: Any) -> JokeRecord:
        joke_text = normalize_text(joke)
        response_text = normalize_text(response)
        if not joke_text or not response_text:
            raise JokeValidationError("joke and response are required")
        if not self.repository.has_category(category):
            raise CategoryNotFoundError(f"unknown category {category}")
        record = self.repository.add_joke(category, joke_text, response_text)
        logger.info("Added joke to %s", category)
        return record

    def add_category(self, name: Any) -> str:
        candidate = normalize_text(name)
        if not is_valid_category_name(candidate):
            raise JokeValidationError("category name must be 1-64 characters [A-Za-z0-9_-]")
        self.repository.add_category(candidate)
        logger.info("Registered category %s", candidate)
        return candidate

    def counts_by_category(self) -> dict[str, int]:
        counts = self.repository.count_by_category()
        # categories without jokes are reported as 0, never omitted
        return {name: counts.get(name, 0) for name in self.repository.list_categories()}

    def search(self, term: Optional[str]) -> list[tuple[str, JokeRecord]]:
        needle = normalize_text(term).casefold()
        if not needle:
            return []
        return [
            (category, record)
            for category, record in self.repository.iter_jokes()
            if matches_term(record, needle)
        ]

    def seed(self, entries: Mapping[str, Sequence[Mapping[str, str]]]) -> bool:
        """Load `entries` only when the backend holds no jokes yet."""
        if self.repository.has_jokes():
            return False
        for category, jokes in entries.items():
            if not self.repository.has_category(category):
                self.repository.add_category(category)
            for item in jokes:
                self.repository.add_joke(category, item["joke"], item["response"])
        logger.info("Seeded %d categories with default jokes", len(entries))
        return True
