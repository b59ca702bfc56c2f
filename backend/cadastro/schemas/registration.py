"""Registration request schema."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load, pre_load
from marshmallow.validate import Length

from cadastro.services.registration.dto import ALL_FIELDS, RegistrationIn


def _text(max_length: int | None = None) -> fields.String:
    # Presence is checked by the service so it can answer with a single message
    validate = Length(max=max_length) if max_length else None
    return fields.String(load_default="", allow_none=True, validate=validate)


class RegistrationCreateSchema(Schema):
    """Shape of ``POST /cadastrar``: every field is an optional string.

    Numbers sent for ``number`` are coerced to text; ``null`` becomes ``""``.
    Fields stored as submitted are capped at their column length. Documents
    and phones are stored digits-only after their format checks, so their
    raw length is not limited here.
    """

    class Meta:
        unknown = EXCLUDE

    cnpj = _text()
    cpf = _text()
    name = _text(255)
    cell_phone = _text()
    telephone = _text()
    email = _text(254)
    confirm_email = _text(254)
    cep = _text(9)
    public_place = _text(255)
    neighborhood = _text(255)
    city = _text(255)
    state = _text(2)
    number = _text(20)
    complement = _text(255)

    @pre_load
    def stringify_number(self, data: Any, **_: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("number"), int) and not isinstance(
            data.get("number"), bool
        ):
            data = {**data, "number": str(data["number"])}
        return data

    @post_load
    def make_dto(self, data: dict[str, Any], **_: Any) -> RegistrationIn:
        values = {name: data.get(name) or "" for name in ALL_FIELDS}
        return RegistrationIn(**values)
