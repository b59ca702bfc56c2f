"""Centralized JSON error handling for the API.

Every error leaves the service as ``{"error": <message>, "code": <code>,
"request_id": <id>}`` so clients only ever need to read the ``error`` key.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from werkzeug.exceptions import HTTPException

from cadastro.core.logger import ensure_request_id

log = logging.getLogger(__name__)


def _http_status_to_code(status_code: int) -> str:
    """Map common HTTP status codes to canonical, stable error codes."""
    mapping = {
        400: "bad_request",
        404: "not_found",
        405: "method_not_allowed",
        413: "payload_too_large",
        415: "unsupported_media_type",
        500: "internal_server_error",
        503: "service_unavailable",
    }
    return mapping.get(status_code, "error")


def _error_body(
    *,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build the JSON error payload.

    :param code: Stable machine-consumable error code.
    :param message: Human-readable error summary (safe for clients).
    :param details: Optional safe, structured details.
    :returns: Error dictionary.
    :rtype: dict
    """
    body: dict[str, Any] = {"error": message, "code": code}
    if details:
        body["details"] = details
    body["request_id"] = ensure_request_id()
    return body


def _error_response(body: dict[str, Any], status: int) -> tuple[Response, int]:
    return jsonify(body), status


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier, typically snake_case. Defaults to
        ``"bad_request"``.
    details : dict[str, Any] | None, optional
        Optional structured payload (e.g., missing fields) included in the
        response body.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "bad_request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.details = details or {}

    def to_body(self) -> dict[str, Any]:
        """Serialize error metadata into the JSON error payload."""
        return _error_body(code=self.code, message=self.message, details=self.details or None)


class BadRequest(APIError):
    """400 for payloads that fail validation."""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "bad_request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code=code, details=details)


class InternalError(APIError):
    """500 for server-side failures whose message is already client-safe."""

    def __init__(self, message: str = "Unexpected error", code: str = "internal_server_error") -> None:
        super().__init__(message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR, code=code)


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - 4xx are logged as warnings, 5xx as errors.
    - Unexpected exceptions never leak internal details to clients.
    """

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        body = err.to_body()
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: code=%s status=%s msg=%s",
            err.code,
            err.status_code,
            err.message,
            extra={"code": err.code, "status": err.status_code},
        )
        return _error_response(body, err.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        error_code = _http_status_to_code(status)
        message = (err.description or error_code.replace("_", " ").capitalize()).strip()
        if status == HTTPStatus.NOT_FOUND and request:
            message = f"Route '{request.path}' not found"
        level = log.error if status >= 500 else log.warning
        level("HTTPException: code=%s status=%s detail=%s", error_code, status, message)
        return _error_response(_error_body(code=error_code, message=message), status)

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        body = _error_body(
            code="validation_error",
            message="Corpo da requisição inválido.",
            details={"errors": err.messages},
        )
        fields = sorted(err.messages) if isinstance(err.messages, dict) else []
        log.warning("ValidationError: fields=%s", fields)
        return _error_response(body, HTTPStatus.BAD_REQUEST)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        log.error("Unhandled exception", exc_info=err)
        body = _error_body(code="internal_server_error", message="Unexpected error")
        return _error_response(body, HTTPStatus.INTERNAL_SERVER_ERROR)
