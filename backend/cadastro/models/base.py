"""Column mixins shared by mapped models (typed SQLAlchemy 2.0)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column


class PKMixin:
    """Integer surrogate key ``id``."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class CreatedAtMixin:
    """Insert timestamp filled by the database.

    Rows using this mixin are append-only, so there is no ``updated_at``.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class ReprMixin:
    """``repr`` with the key plus the columns named in ``__repr_fields__``."""

    __repr_fields__: tuple[str, ...] = ()

    def __repr__(self) -> str:
        parts = [f"id={getattr(self, 'id', None)}"]
        parts.extend(f"{name}={getattr(self, name, None)!r}" for name in self.__repr_fields__)
        return f"<{type(self).__name__} {' '.join(parts)}>"
