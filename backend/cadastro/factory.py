"""Application factory wiring Flask extensions, services and blueprints."""

from __future__ import annotations

from flask import Flask

from cadastro.core.config import BaseConfig, get_config
from cadastro.core.logger import configure_logging, init_app as init_logging


def init_services(app: Flask) -> None:
    """Build the long-lived service graph once per app.

    The registration service receives its collaborators here: a Unit of Work
    factory bound to the pooled SQLAlchemy session and an address verifier
    whose lookup client carries the configured timeout.
    """
    from cadastro.api.deps import REGISTRATION_SERVICE_KEY
    from cadastro.infra.viacep.client import ViaCepClient
    from cadastro.services.address.service import AddressVerifier
    from cadastro.services.registration.service import RegistrationService
    from cadastro.uow import SQLAlchemyUnitOfWork

    client = ViaCepClient(
        app.config.get("VIACEP_BASE_URL", "https://viacep.com.br/ws"),
        timeout=float(app.config.get("VIACEP_TIMEOUT", 5.0)),
    )
    app.extensions[REGISTRATION_SERVICE_KEY] = RegistrationService(
        uow_factory=SQLAlchemyUnitOfWork,
        verifier=AddressVerifier(client),
        enforce_address=bool(app.config.get("ENFORCE_ADDRESS_VERIFICATION", True)),
    )


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application."""

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from cadastro.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from cadastro.core import cors

    cors.init_app(app)

    init_services(app)

    from cadastro.api import init_app as init_api

    init_api(app)

    from cadastro.core import errors

    errors.init_app(app)

    return app
