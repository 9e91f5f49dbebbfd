from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the jokebook package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jokebook.app import create_app  # noqa: E402
from jokebook.core.errors import StorageError  # noqa: E402
from jokebook.domain.jokes import DEFAULT_JOKES  # noqa: E402
from jokebook.repositories.memory_repository import MemoryRepository  # noqa: E402
from jokebook.services.joke_service import JokeStore  # noqa: E402


class _FailingRepository(MemoryRepository):
    def list_categories(self) -> list[str]:
        raise StorageError()

    def count_by_category(self) -> dict[str, int]:
        raise StorageError()


@pytest.fixture()
def client():
    store = JokeStore(MemoryRepository(), rng=random.Random(11))
    store.seed(DEFAULT_JOKES)
    return TestClient(create_app(store))


def test_categories(client):
    resp = client.get("/jokebook/categories")
    assert resp.status_code == 200
    assert resp.json() == ["funnyJoke", "lameJoke"]


def test_random_joke(client):
    resp = client.get("/jokebook/joke/lameJoke")
    assert resp.status_code == 200
    assert resp.json() in DEFAULT_JOKES["lameJoke"]


def test_random_joke_unknown_category(client):
    resp = client.get("/jokebook/joke/unknownCat")
    assert resp.status_code == 200
    assert resp.json() == {"error": "no jokes for category unknownCat"}


def test_add_joke_then_stats(client):
    resp = client.post("/jokebook/joke/funnyJoke", json={"joke": "Q", "response": "A"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "joke": {"joke": "Q", "response": "A"}}

    stats = client.get("/jokebook/stats")
    assert stats.json() == {"funnyJoke": 4, "lameJoke": 2}


@pytest.mark.parametrize("body", [{"joke": "Q"}, {"response": "A"}, {"joke": "", "response": "A"}, {}])
def test_add_joke_missing_fields(client, body):
    resp = client.post("/jokebook/joke/funnyJoke", json=body)
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert client.get("/jokebook/stats").json()["funnyJoke"] == 3


def test_add_joke_without_body(client):
    resp = client.post("/jokebook/joke/funnyJoke")
    assert resp.status_code == 400


@pytest.mark.parametrize("raw", [b"{not json", b"[\"Q\", \"A\"]", b"\"Q\"", b"42"])
def test_add_joke_non_object_body(client, raw):
    resp = client.post(
        "/jokebook/joke/funnyJoke",
        content=raw,
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "joke and response are required"}
    assert client.get("/jokebook/stats").json()["funnyJoke"] == 3


def test_register_category_malformed_body(client):
    resp = client.post(
        "/jokebook/categories",
        content=b"{oops",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_add_joke_unknown_category(client):
    resp = client.post("/jokebook/joke/unknownCat", json={"joke": "Q", "response": "A"})
    assert resp.status_code == 200
    assert resp.json() == {"error": "unknown category unknownCat"}


def test_register_category(client):
    resp = client.post("/jokebook/categories", json={"name": "darkJoke"})
    assert resp.status_code == 201
    assert resp.json() == {"success": True, "category": "darkJoke"}
    assert client.get("/jokebook/stats").json() == {"funnyJoke": 3, "lameJoke": 2, "darkJoke": 0}

    dup = client.post("/jokebook/categories", json={"name": "darkJoke"})
    assert dup.status_code == 409

    bad = client.post("/jokebook/categories", json={"name": "no spaces allowed"})
    assert bad.status_code == 400


def test_search(client):
    resp = client.get("/jokebook/search", params={"word": "NOC"})
    assert resp.status_code == 200
    assert resp.json() == [
        {
            "category": "lameJoke",
            "joke": "Dlaczego programiści preferują noc?",
            "response": "Bo w nocy jest mniej bugów do łapania!",
        }
    ]


@pytest.mark.parametrize("params", [{}, {"word": ""}, {"word": "   "}])
def test_search_blank_term(client, params):
    resp = client.get("/jokebook/search", params=params)
    assert resp.json() == []


def test_storage_error_maps_to_500():
    client = TestClient(create_app(JokeStore(_FailingRepository())))
    resp = client.get("/jokebook/categories")
    assert resp.status_code == 500
    assert resp.json() == {"error": "storage error"}
    assert client.get("/jokebook/stats").status_code == 500
