# File: src/gradebook/db/store.py
import logging
from typing import Any, List, Optional, Type, TypeVar

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

# Registers every table on SQLModel.metadata.
from src.gradebook import models  # noqa: F401

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class Store:
    """
    In-memory collection of users, courses, assignments and submissions.

    Each store owns its own SQLite engine. With the default "sqlite://" URL the
    database lives in a single shared connection, so two stores never see each
    other's data. The store does no validation; callers own the shape of what
    they put.
    """

    def __init__(self, database_url: str = "sqlite://", echo: bool = False):
        connect_args = {}
        engine_kwargs = {}
        if database_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(database_url, echo=echo, connect_args=connect_args, **engine_kwargs)
        SQLModel.metadata.create_all(self.engine)
        logger.info(f"Store created on {database_url}")

    def session(self) -> Session:
        # Entities handed out must stay readable once the session is closed.
        return Session(self.engine, expire_on_commit=False)

    def get(self, model: Type[ModelT], entity_id: str) -> Optional[ModelT]:
        with self.session() as session:
            return session.get(model, entity_id)

    def list(self, model: Type[ModelT], **filters: Any) -> List[ModelT]:
        """All rows of `model` matching every non-None filter (AND)."""
        query = select(model)
        for field, value in filters.items():
            if value is None:
                continue
            query = query.where(getattr(model, field) == value)
        with self.session() as session:
            return list(session.exec(query).all())

    def put(self, entity: ModelT) -> ModelT:
        with self.session() as session:
            entity = session.merge(entity)
            session.commit()
            return entity

    def delete(self, model: Type[ModelT], entity_id: str) -> bool:
        with self.session() as session:
            entity = session.get(model, entity_id)
            if entity is None:
                return False
            session.delete(entity)
            session.commit()
            return True

    def clear(self) -> None:
        with self.session() as session:
            for table in reversed(SQLModel.metadata.sorted_tables):
                session.execute(table.delete())
            session.commit()

    def dispose(self) -> None:
        self.engine.dispose()
