"""Unit tests for RegistrationRepository."""

import pytest
from cadastro.models import Registration
from cadastro.repositories.registration import RegistrationRepository
from sqlalchemy.exc import IntegrityError
from tests.factories.registration import RegistrationFactory


class TestRegistrationRepository:
    """Ensure ``RegistrationRepository.add`` stages and flushes rows."""

    @pytest.fixture()
    def repo(self, session):
        return RegistrationRepository(session=session)

    def test_add_assigns_primary_key(self, repo, session):
        row = repo.add(RegistrationFactory.build())

        assert row.id is not None
        assert session.get(Registration, row.id) is row

    def test_add_does_not_commit(self, repo, session):
        repo.add(RegistrationFactory.build())
        session.rollback()

        assert session.query(Registration).count() == 0

    def test_add_surfaces_driver_errors_on_flush(self, repo, session):
        row = RegistrationFactory.build()
        row.cnpj = None

        with pytest.raises(IntegrityError):
            repo.add(row)
        session.rollback()

    def test_defaults_to_flask_session(self, db):
        assert RegistrationRepository().session is db.session
