from __future__ import annotations

from collections.abc import Callable

from cadastro.core import errors as api_errors
from cadastro.services._shared.errors import (
    AddressVerificationError,
    PersistenceError,
    RegistrationValidationError,
    ServiceError,
)
from cadastro.uow.base import UnitOfWork

UnitOfWorkFactory = Callable[[], UnitOfWork]


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Open read-write units of work from an injected factory.
    * Centralize error translation.

    Notes
    -----
    - Services never touch the global session; they go through a Unit of Work.
    - The factory is injected so tests can swap the datastore.
    """

    def __init__(self, *, uow_factory: UnitOfWorkFactory) -> None:
        """
        Initialize the base service.

        :param uow_factory: Callable returning a fresh read-write Unit of Work.
        :type uow_factory: Callable[[], UnitOfWork]
        """
        self._uow_factory = uow_factory

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> UnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: UnitOfWork
        """
        return self._uow_factory()

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(
        self, exc: Exception, *, expose_detail: bool = False
    ) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :param expose_detail: Surface the raw datastore message on 500s.
        :type expose_detail: bool
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, RegistrationValidationError):
            # → 400 with optional details (missing fields)
            return api_errors.BadRequest(exc.message, code=exc.code, details=exc.details or None)

        if isinstance(exc, AddressVerificationError):
            # → 400
            return api_errors.BadRequest(exc.message, code=exc.code)

        if isinstance(exc, PersistenceError):
            # → 500
            message = exc.detail if expose_detail and exc.detail else exc.message
            return api_errors.InternalError(message, code=exc.code)

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.BadRequest(exc.message, code=exc.code)

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
