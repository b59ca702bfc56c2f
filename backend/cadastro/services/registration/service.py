"""
RegistrationService
===================

Process-level service that accepts a buyer/seller registration:

- Validates required fields, CPF, CNPJ, phones, e-mail and CEP format,
  stopping at the first failure.
- Cross-checks the address with the postal lookup (blocking or advisory,
  depending on ``enforce_address``).
- Inserts one normalized row in a single transaction.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from sqlalchemy.exc import SQLAlchemyError

from cadastro.models.registration import Registration
from cadastro.services._shared.base import BaseService, UnitOfWorkFactory
from cadastro.services._shared.errors import (
    AddressVerificationError,
    PersistenceError,
    RegistrationValidationError,
)
from cadastro.services.address.dto import AddressRejected
from cadastro.services.address.service import AddressVerifier
from cadastro.services.registration.dto import REQUIRED_FIELDS, RegistrationIn, RegistrationOut
from cadastro.validation.documents import is_valid_cnpj, is_valid_cpf, only_digits
from cadastro.validation.fields import (
    emails_match,
    is_valid_cell_phone,
    is_valid_cep,
    is_valid_email,
    is_valid_landline,
    strip_cep,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Dados Cadastrados com sucesso!"
PERSISTENCE_MESSAGE = "Erro ao salvar cadastro."


class RegistrationService(BaseService):
    """
    Orchestrates the registration flow.

    :param uow_factory: Callable returning a read-write Unit of Work.
    :param verifier: Address verifier wrapping the postal lookup client.
    :param enforce_address: When ``True`` a rejected address aborts with
        :class:`AddressVerificationError`; when ``False`` it is only logged.
    """

    def __init__(
        self,
        *,
        uow_factory: UnitOfWorkFactory,
        verifier: AddressVerifier,
        enforce_address: bool = True,
    ) -> None:
        super().__init__(uow_factory=uow_factory)
        self.verifier = verifier
        self.enforce_address = enforce_address

    def register(self, dto: RegistrationIn) -> RegistrationOut:
        """
        Validate, verify and persist a registration.

        :param dto: Registration input.
        :type dto: :class:`RegistrationIn`
        :returns: Confirmation payload.
        :rtype: :class:`RegistrationOut`
        :raises RegistrationValidationError: Missing or malformed field.
        :raises AddressVerificationError: Lookup rejected the address (enforced mode).
        :raises PersistenceError: The insert failed.
        """
        self._check_required(dto)
        self._check_documents(dto)
        self._check_phones(dto)
        self._check_email(dto)
        self._check_cep(dto)

        address_verified = self._verify_address(dto)

        self._persist(dto)
        logger.info("registration.created", extra={"stage": "persist"})
        return RegistrationOut(message=SUCCESS_MESSAGE, address_verified=address_verified)

    # ------------------------------------------------------------------ #
    # Stages
    # ------------------------------------------------------------------ #

    def _check_required(self, dto: RegistrationIn) -> None:
        missing = [name for name in REQUIRED_FIELDS if not getattr(dto, name)]
        if missing:
            self._fail(
                "required_fields",
                "Todos os campos obrigatórios devem ser preenchidos.",
                details={"missing": missing},
            )

    def _check_documents(self, dto: RegistrationIn) -> None:
        if not is_valid_cpf(dto.cpf):
            self._fail("invalid_cpf", "CPF inválido")
        if not is_valid_cnpj(only_digits(dto.cnpj)):
            self._fail("invalid_cnpj", "CNPJ inválido")

    def _check_phones(self, dto: RegistrationIn) -> None:
        if not is_valid_cell_phone(dto.cell_phone):
            self._fail("invalid_cell_phone", "Formato de celular inválido")
        if not is_valid_landline(dto.telephone):
            self._fail("invalid_telephone", "Formato do telefone fixo inválido")

    def _check_email(self, dto: RegistrationIn) -> None:
        if not dto.email:
            self._fail("email_required", "Campo email obrigatório!")
        if not dto.confirm_email:
            self._fail("confirm_email_required", "Campo de confirmação de email obrigatório!")
        if not is_valid_email(dto.email):
            self._fail("invalid_email", "Formato de email inválido!")
        if not emails_match(dto.email, dto.confirm_email):
            self._fail("email_mismatch", "Confirmação de email deve ser igual ao campo email!")

    def _check_cep(self, dto: RegistrationIn) -> None:
        # Blocks in advisory mode too: a malformed CEP does not fit the column
        if not is_valid_cep(dto.cep):
            self._fail("invalid_cep", "CEP inválido")

    def _verify_address(self, dto: RegistrationIn) -> bool:
        # The verifier gets the hyphenated CEP; stripping happens inside it
        check = self.verifier.verify(
            dto.cep, dto.state, dto.city, dto.public_place, dto.neighborhood
        )
        if not isinstance(check, AddressRejected):
            return True
        if self.enforce_address:
            raise AddressVerificationError(check.reason, code=check.code)
        logger.warning(
            "registration.address_unverified: %s",
            check.reason,
            extra={"stage": "address", "code": check.code},
        )
        return False

    def _persist(self, dto: RegistrationIn) -> None:
        row = Registration(
            name=dto.name,
            email=dto.email,
            cell_phone=only_digits(dto.cell_phone),
            telephone=only_digits(dto.telephone),
            cpf=only_digits(dto.cpf),
            cnpj=only_digits(dto.cnpj),
            cep=strip_cep(dto.cep),
            state=dto.state,
            city=dto.city,
            public_place=dto.public_place or "",
            neighborhood=dto.neighborhood or "",
            number=dto.number or "",
            complement=dto.complement or "",
        )
        try:
            with self.rw_uow() as uow:
                uow.registrations.add(row)
        except SQLAlchemyError as exc:
            logger.error("registration.persist_failed", exc_info=True, extra={"stage": "persist"})
            raise PersistenceError(PERSISTENCE_MESSAGE, detail=str(exc)) from exc

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _fail(code: str, message: str, *, details: dict[str, Any] | None = None) -> NoReturn:
        logger.info("registration.rejected", extra={"stage": "validation", "code": code})
        raise RegistrationValidationError(message, code=code, details=details)
