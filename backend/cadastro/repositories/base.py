"""Persistence-only repository base for SQLAlchemy 2.x.

Repositories stage and query rows. Committing and rolling back belong to the
Unit of Work that handed them their session.
"""

from __future__ import annotations

from typing import Generic, TypeVar, cast

from sqlalchemy.orm import Session

from cadastro.core.extensions import db

E = TypeVar("E")  # mapped entity


class BaseRepository(Generic[E]):
    """Single-model repository. Subclasses set ``model``."""

    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """
        :param session: Session owned by the caller's Unit of Work. Falls back
            to the Flask-scoped ``db.session`` when omitted.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session = session

    @property
    def session(self) -> Session:
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    def add(self, instance: E) -> E:
        """Stage ``instance`` and flush so its primary key is assigned.

        Driver errors (lost connection, constraint violations) surface here,
        inside the caller's Unit of Work.

        :param instance: Transient entity.
        :returns: The same instance, now persistent.
        """
        self.session.add(instance)
        self.session.flush()
        return instance
