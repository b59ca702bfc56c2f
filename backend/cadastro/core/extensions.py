"""Database and migration handles shared by the whole process."""

from __future__ import annotations

from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

# Deterministic constraint names keep Alembic autogenerate diffs stable
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}

db: SQLAlchemy = SQLAlchemy(
    metadata=MetaData(naming_convention=NAMING_CONVENTION),
    session_options={"autoflush": False},
)
migrate = Migrate(render_as_batch=True)


def init_app(app: Flask) -> None:
    """Bind SQLAlchemy and Flask-Migrate to ``app``.

    The engine (and its connection pool) is created once here and reused by
    every request; sessions are scoped to the app context.
    """
    db.init_app(app)

    # Register the mapped tables on ``db.metadata`` before Alembic inspects it
    import cadastro.models  # noqa: F401

    migrate.init_app(app, db)
