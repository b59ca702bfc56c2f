"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from cadastro.repositories.base import BaseRepository
from cadastro.repositories.registration import RegistrationRepository

__all__ = [
    "BaseRepository",
    "RegistrationRepository",
]
