from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from jokebook.core.errors import JokebookError
from jokebook.services.joke_service import JokeStore

router = APIRouter(prefix="/jokebook", tags=["jokebook"])


def _get_store(request: Request) -> JokeStore:
    store = getattr(getattr(request.app, "state", None), "joke_store", None)
    if not store:
        raise RuntimeError("JokeStore not configured")
    return store


def _error_response(err: JokebookError) -> JSONResponse:
    return JSONResponse({"error": err.message}, status_code=err.status_code)


async def _json_object(request: Request) -> dict:
    """Request body as a dict; malformed or non-object JSON reads as empty."""
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


@router.get("/categories")
def list_categories(request: Request):
    try:
        return _get_store(request).list_categories()
    except JokebookError as exc:
        return _error_response(exc)


@router.post("/categories")
def add_category(request: Request, data: dict = Depends(_json_object)):
    try:
        name = _get_store(request).add_category(data.get("name"))
    except JokebookError as exc:
        return _error_response(exc)
    return JSONResponse({"success": True, "category": name}, status_code=201)


@router.get("/joke/{category}")
def random_joke(category: str, request: Request):
    try:
        record = _get_store(request).random_joke(category)
    except JokebookError as exc:
        return _error_response(exc)
    return record.to_dict()


@router.post("/joke/{category}")
def add_joke(category: str, request: Request, data: dict = Depends(_json_object)):
    try:
        record = _get_store(request).add_joke(category, data.get("joke"), data.get("response"))
    except JokebookError as exc:
        return _error_response(exc)
    return {"success": True, "joke": record.to_dict()}


@router.get("/stats")
def stats(request: Request):
    try:
        return _get_store(request).counts_by_category()
    except JokebookError as exc:
        return _error_response(exc)


@router.get("/search")
def search(request: Request, word: str = ""):
    try:
        matches = _get_store(request).search(word)
    except JokebookError as exc:
        return _error_response(exc)
    return [{"category": category, **record.to_dict()} for category, record in matches]
