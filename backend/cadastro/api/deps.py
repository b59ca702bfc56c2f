"""Helpers shared by the route modules."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from cadastro.services.registration.service import RegistrationService

F = TypeVar("F", bound=Callable[..., Any])

REGISTRATION_SERVICE_KEY = "registration_service"

log = logging.getLogger("cadastro.api")


def get_registration_service() -> RegistrationService:
    """Return the service built by :func:`cadastro.factory.init_services`."""
    try:
        return current_app.extensions[REGISTRATION_SERVICE_KEY]
    except KeyError as exc:
        raise RuntimeError("Registration service missing; build the app with create_app()") from exc


def json_response(payload: Any, *, status: int = 200) -> tuple[Response, int]:
    return jsonify(payload), status


def timing(func: F) -> F:
    """Log ``request.elapsed`` once the handler returns or raises."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        started = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            log.info(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": elapsed_ms},
            )

    return wrapper  # type: ignore[return-value]
