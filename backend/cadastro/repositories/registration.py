"""Registration repository."""

from __future__ import annotations

from cadastro.models.registration import Registration
from cadastro.repositories.base import BaseRepository


class RegistrationRepository(BaseRepository[Registration]):
    """Insert-only repository for :class:`Registration`.

    Rows are append-only and the API never reads them back, so the only
    operation is the inherited :meth:`add`.
    """

    model = Registration
