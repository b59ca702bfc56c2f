"""Registration endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app, request
from marshmallow import ValidationError

from cadastro.api.deps import get_registration_service, json_response, timing
from cadastro.schemas import RegistrationCreateSchema
from cadastro.services._shared.errors import ServiceError

bp = Blueprint("registrations", __name__)

registration_create_schema = RegistrationCreateSchema()


@bp.post("/cadastrar")
@timing
def create_registration():
    """Validate, verify and persist a buyer/seller registration."""

    payload = request.get_json(silent=True)
    if payload is None and request.get_data():
        raise ValidationError({"_schema": ["Corpo JSON malformado."]})
    dto = registration_create_schema.load(payload or {})
    service = get_registration_service()
    try:
        result = service.register(dto)
    except ServiceError as exc:
        expose = bool(current_app.config.get("EXPOSE_PERSISTENCE_ERRORS", False))
        raise service.translate_exceptions(exc, expose_detail=expose) from exc
    return json_response({"message": result.message})
