"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or HTTP
machinery. The translation to HTTP responses is handled by
``cadastro/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from typing import Any

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    :param message: Client-safe description.
    :type message: str
    :param code: Stable machine-readable identifier.
    :type code: str
    """

    default_code = "service_error"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class RegistrationValidationError(ServiceError):
    """
    Raised when a registration field is missing or malformed.

    :param details: Optional structured context (e.g. ``{"missing": [...]}``).
    :type details: dict[str, Any] | None
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.details = details or {}


class AddressVerificationError(ServiceError):
    """Raised when the postal lookup rejects the submitted address."""

    default_code = "address_rejected"


class PersistenceError(ServiceError):
    """
    Raised when the datastore refuses the insert.

    :param detail: Underlying driver message; logged, exposed only on request.
    :type detail: str
    """

    default_code = "persistence_error"

    def __init__(self, message: str, *, detail: str = "", code: str | None = None) -> None:
        super().__init__(message, code=code)
        self.detail = detail
