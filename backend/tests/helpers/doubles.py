"""Test doubles for the registration service collaborators."""

from __future__ import annotations

from typing import Any

from cadastro.services.address.dto import AddressCheck, AddressVerified, ViaCepAddress
from cadastro.uow.base import UnitOfWork
from sqlalchemy.exc import OperationalError

PAULISTA = ViaCepAddress(
    cep="01310-100",
    logradouro="Avenida Paulista",
    bairro="Bela Vista",
    localidade="São Paulo",
    uf="SP",
)


class StubVerifier:
    """Return a canned verification result and record every call."""

    def __init__(self, result: AddressCheck | None = None) -> None:
        self.result = result or AddressVerified(address=PAULISTA)
        self.calls: list[tuple[Any, ...]] = []

    def verify(self, *args: Any) -> AddressCheck:
        self.calls.append(args)
        return self.result


class ExplodingRepository:
    """Repository whose insert fails like a lost database connection."""

    def add(self, instance: Any) -> Any:
        raise OperationalError(
            "INSERT INTO comprador_vendedor ...", {}, Exception("connection refused")
        )


class ExplodingUnitOfWork(UnitOfWork):
    """Unit of Work that fails on insert and records the rollback."""

    instances: list[ExplodingUnitOfWork] = []

    def __init__(self) -> None:
        self.registrations = ExplodingRepository()  # type: ignore[assignment]
        self.committed = False
        self.rolled_back = False
        ExplodingUnitOfWork.instances.append(self)

    def __enter__(self) -> ExplodingUnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True
