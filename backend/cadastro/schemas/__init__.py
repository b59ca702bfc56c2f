"""Marshmallow schemas for request parsing."""

from __future__ import annotations

from .registration import RegistrationCreateSchema

__all__ = ["RegistrationCreateSchema"]
