"""Service layer public API.

Re-exports
----------
- Base primitives (from ``cadastro.services._shared.base``)
    * :class:`BaseService`

- Address verification (from ``cadastro.services.address``)
    * :class:`AddressVerifier`
    * Results: :class:`AddressVerified`, :class:`AddressRejected`

- Registration (from ``cadastro.services.registration``)
    * :class:`RegistrationService`
    * DTOs: :class:`RegistrationIn`, :class:`RegistrationOut`
"""

from __future__ import annotations

from ._shared.base import BaseService
from ._shared.errors import (
    AddressVerificationError,
    PersistenceError,
    RegistrationValidationError,
    ServiceError,
)
from .address.dto import AddressRejected, AddressVerified, ViaCepAddress
from .address.service import AddressVerifier
from .registration.dto import RegistrationIn, RegistrationOut
from .registration.service import RegistrationService

__all__ = [
    # Base
    "BaseService",
    "ServiceError",
    "RegistrationValidationError",
    "AddressVerificationError",
    "PersistenceError",
    # Address
    "AddressVerifier",
    "AddressVerified",
    "AddressRejected",
    "ViaCepAddress",
    # Registration
    "RegistrationService",
    "RegistrationIn",
    "RegistrationOut",
]
