"""Domain helpers for joke records, category names and the default dataset."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

CATEGORY_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")

DEFAULT_JOKES: dict[str, list[dict[str, str]]] = {
    "funnyJoke": [
        {
            "joke": "Dlaczego komputer poszedł do lekarza?",
            "response": "Bo złapał wirusa!",
        },
        {
            "joke": "Dlaczego komputer nie może być głodny?",
            "response": "Bo ma pełen dysk!",
        },
        {
            "joke": "Co mówi jeden bit do drugiego?",
            "response": "„Trzymaj się, zaraz się przestawiamy!\"",
        },
    ],
    "lameJoke": [
        {
            "joke": "Dlaczego programiści preferują noc?",
            "response": "Bo w nocy jest mniej bugów do łapania!",
        },
        {
            "joke": "Jak nazywa się bardzo szybki programista?",
            "response": "Błyskawiczny kompilator!",
        },
    ],
}


@dataclass(frozen=True)
class JokeRecord:
    """A prompt/punchline pair; `id` is set only by durable backends."""

    joke: str
    response: str
    id: Optional[int] = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"joke": self.joke, "response": self.response}
        if self.id is not None:
            data["id"] = self.id
        return data


def normalize_text(value: Any) -> str:
    """Return stripped text, or "" for missing/non-string values."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def is_valid_category_name(value: str | None) -> bool:
    if not value:
        return False
    return bool(CATEGORY_PATTERN.fullmatch(value))


def matches_term(record: JokeRecord, needle: str) -> bool:
    """Case-insensitive substring check against both fields. `needle` must be casefolded."""
    return needle in record.joke.casefold() or needle in record.response.casefold()
