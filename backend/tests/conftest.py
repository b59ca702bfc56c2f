"""Pytest fixtures for the registration API.

The app runs against an in-memory SQLite database created once per session;
every test starts from empty tables. Outbound ViaCEP calls are intercepted
with :mod:`responses`.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any

import pytest
import responses
from cadastro.core.config import TestingConfig
from cadastro.core.extensions import db as _db  # Flask-SQLAlchemy instance
from cadastro.factory import create_app  # application factory under test

VIACEP_BASE_URL = TestingConfig.VIACEP_BASE_URL


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestingConfig` applied and logging
        noise reduced.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestingConfig)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture(scope="session")
def db(app):
    """Create database tables once per test session.

    Yields
    ------
    flask_sqlalchemy.SQLAlchemy
        Database extension bound to the testing application.
    """
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="function")
def session(db):
    """Provide the app session and wipe every table after the test.

    The services commit through their Unit of Work, so isolation comes from
    deleting rows afterwards rather than from an outer rollback.
    """
    yield db.session
    db.session.rollback()
    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()


@pytest.fixture()
def client(app, db):
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def viacep() -> Iterator[responses.RequestsMock]:
    """Intercept outbound HTTP; unregistered URLs raise ``ConnectionError``."""

    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture()
def viacep_url() -> Callable[[str], str]:
    """Build the lookup URL the client will hit for a digits-only CEP."""

    def _build(cep: str) -> str:
        return f"{VIACEP_BASE_URL}/{cep}/json/"

    return _build


@pytest.fixture()
def paulista_lookup() -> dict[str, Any]:
    """ViaCEP payload for ``01310-100``."""

    return {
        "cep": "01310-100",
        "logradouro": "Avenida Paulista",
        "complemento": "de 612 a 1510 - lado par",
        "bairro": "Bela Vista",
        "localidade": "São Paulo",
        "uf": "SP",
        "ibge": "3550308",
        "ddd": "11",
    }


@pytest.fixture()
def valid_payload() -> dict[str, str]:
    """Registration body that passes every local check for ``01310-100``."""

    return {
        "cnpj": "11.222.333/0001-81",
        "cpf": "529.982.247-25",
        "name": "Maria da Silva",
        "cell_phone": "(11) 98765-4321",
        "telephone": "(11) 3456-7890",
        "email": "maria@example.com.br",
        "confirm_email": "maria@example.com.br",
        "cep": "01310-100",
        "public_place": "Avenida Paulista",
        "neighborhood": "Bela Vista",
        "number": "1000",
        "complement": "Conjunto 12",
        "city": "São Paulo",
        "state": "SP",
    }


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker("pt_BR")
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the per-test session fixture."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield
