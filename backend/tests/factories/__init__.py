"""Factory Boy base wired to the session handed out by the pytest fixtures."""

from __future__ import annotations

import factory


class SQLAlchemySession:
    """Hold the per-test session so factories persist into it."""

    _session = None

    @classmethod
    def set(cls, session):
        cls._session = session

    @classmethod
    def get(cls):
        """Return the registered session.

        Raises
        ------
        RuntimeError
            If a factory runs before the ``session`` fixture wired one in.
        """
        if cls._session is None:
            raise RuntimeError("Factories session not set. Did you pass the 'session' fixture?")
        return cls._session


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Abstract factory: ``create()`` adds and flushes, the test decides on commit."""

    class Meta:
        abstract = True
        # A callable keeps the lookup lazy so each test sees its own session
        sqlalchemy_session_factory = SQLAlchemySession.get
        sqlalchemy_session_persistence = "flush"
