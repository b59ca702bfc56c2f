"""Unit of Work over the Flask-SQLAlchemy session."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cadastro.core.extensions import db
from cadastro.repositories import RegistrationRepository
from cadastro.uow.base import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Commits when the block exits cleanly and rolls back otherwise.

    Without an explicit session it uses ``db.session``, so the insert runs on
    a pooled connection scoped to the current app context.
    """

    def __init__(self, session: Session | None = None) -> None:
        self.session = session if session is not None else db.session
        self.registrations = RegistrationRepository(session=self.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
            return
        try:
            self.commit()
        except SQLAlchemyError:
            self.rollback()
            raise

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
