"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jokebook.core.errors import CategoryExistsError, CategoryNotFoundError, StorageError
from jokebook.core.logging import get_logger
from jokebook.db.models import Category, Joke
from jokebook.db.session import get_session
from jokebook.domain.jokes import JokeRecord
from jokebook.repositories.base import JokeRepository

logger = get_logger(__name__)


def _entity_to_record(entity: Joke) -> JokeRecord:
    return JokeRecord(joke=entity.joke, response=entity.response, id=entity.id)


class SQLRepository(JokeRepository):
    """CRUD helpers wrapping the SQLAlchemy session."""

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with get_session() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.exception("Storage failure: %s", exc)
            raise StorageError() from exc

    # -------------------------- categories --------------------------
    def list_categories(self) -> list[str]:
        with self._session() as session:
            stmt = select(Category.name).order_by(Category.id)
            return list(session.execute(stmt).scalars().all())

    def has_category(self, name: str) -> bool:
        with self._session() as session:
            stmt = select(Category.id).where(Category.name == name).limit(1)
            return session.execute(stmt).first() is not None

    def add_category(self, name: str) -> None:
        with self._session() as session:
            exists = session.execute(select(Category.id).where(Category.name == name).limit(1)).first()
            if exists is not None:
                raise CategoryExistsError(f"category {name} already exists")
            session.add(Category(name=name, created_at=datetime.now(timezone.utc)))
            try:
                session.commit()
            except IntegrityError as exc:
                # lost a race with a concurrent insert of the same name
                session.rollback()
                raise CategoryExistsError(f"category {name} already exists") from exc

    # -------------------------- jokes --------------------------
    def list_jokes(self, category: str) -> list[JokeRecord]:
        with self._session() as session:
            stmt = select(Joke).where(Joke.category == category).order_by(Joke.id)
            return [_entity_to_record(entity) for entity in session.execute(stmt).scalars().all()]

    def add_joke(self, category: str, joke: str, response: str) -> JokeRecord:
        with self._session() as session:
            owner = session.execute(select(Category.id).where(Category.name == category).limit(1)).first()
            if owner is None:
                raise CategoryNotFoundError(f"unknown category {category}")
            entity = Joke(
                category=category,
                joke=joke,
                response=response,
                created_at=datetime.now(timezone.utc),
            )
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return _entity_to_record(entity)

    def count_by_category(self) -> dict[str, int]:
        with self._session() as session:
            stmt = (
                select(Category.name, func.count(Joke.id))
                .outerjoin(Joke, Joke.category == Category.name)
                .group_by(Category.id, Category.name)
                .order_by(Category.id)
            )
            return {name: int(total or 0) for name, total in session.execute(stmt).all()}

    def iter_jokes(self) -> Iterator[tuple[str, JokeRecord]]:
        with self._session() as session:
            stmt = (
                select(Joke)
                .join(Category, Category.name == Joke.category)
                .order_by(Category.id, Joke.id)
            )
            rows = [(entity.category, _entity_to_record(entity)) for entity in session.execute(stmt).scalars().all()]
        yield from rows

    def has_jokes(self) -> bool:
        with self._session() as session:
            return session.execute(select(Joke.id).limit(1)).first() is not None
