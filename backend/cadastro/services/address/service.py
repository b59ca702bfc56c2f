"""
AddressVerifier
===============

Cross-checks a submitted address against the postal lookup service.

- Short-circuits on the first failing rule.
- Never raises: transport and payload problems become :class:`AddressRejected`.
- Comparisons are exact; the lookup's spelling is authoritative.
"""

from __future__ import annotations

import logging

from cadastro.infra.viacep.client import ViaCepClient, ViaCepError
from cadastro.services.address.dto import (
    AddressCheck,
    AddressRejected,
    AddressVerified,
    ViaCepAddress,
    is_not_found,
)
from cadastro.validation.fields import is_valid_cep, strip_cep

log = logging.getLogger(__name__)

# Client-facing messages, keyed by rejection code
MESSAGES = {
    "address_fields_required": "Campos de endereço obrigatórios!",
    "invalid_cep": "CEP inválido",
    "lookup_failed": "Erro ao consultar CEP!",
    "invalid_lookup_response": "A resposta do ViaCEP é inválida!",
    "cep_not_found": "CEP não encontrado!",
    "state_mismatch": "Estado não corresponde ao CEP informado!",
    "city_mismatch": "Cidade não corresponde ao CEP informado!",
    "street_mismatch": (
        "O logradouro informado não corresponde ao CEP informado "
        "ou não consta ainda na base de dados."
    ),
    "neighborhood_mismatch": (
        "O bairro informado não corresponde ao CEP informado "
        "ou não consta ainda na base de dados."
    ),
}


class AddressVerifier:
    """
    Verify ``(cep, state, city, street, neighborhood)`` against ViaCEP.

    :param client: Lookup client; its timeout bounds how long verification may block.
    :type client: ViaCepClient
    """

    def __init__(self, client: ViaCepClient) -> None:
        self.client = client

    def verify(
        self,
        cep: str,
        state: str,
        city: str,
        public_place: str,
        neighborhood: str,
    ) -> AddressCheck:
        """
        Run the verification rules in order.

        :param cep: Postal code as submitted, hyphen included (``01310-100``).
        :param state: Two-letter state code.
        :param city: City name.
        :param public_place: Street name.
        :param neighborhood: Neighborhood name.
        :returns: :class:`AddressVerified` or :class:`AddressRejected`.
        """
        if not all((cep, state, city, public_place, neighborhood)):
            return self._reject("address_fields_required")

        if not is_valid_cep(cep):
            return self._reject("invalid_cep")

        digits = strip_cep(cep)
        try:
            data = self.client.lookup(digits)
        except ViaCepError as exc:
            log.warning("address.lookup_failed: %s", exc, extra={"cep": digits})
            return self._reject("lookup_failed")

        # "Not found" replies carry only the flag, so look for it before the shape
        if is_not_found(data):
            return self._reject("cep_not_found", cep=digits)

        found = ViaCepAddress.from_payload(data)
        if found is None:
            return self._reject("invalid_lookup_response", cep=digits)

        if found.uf != state:
            return self._reject("state_mismatch", cep=digits)
        if found.localidade != city:
            return self._reject("city_mismatch", cep=digits)
        if found.logradouro != public_place:
            return self._reject("street_mismatch", cep=digits)
        if found.bairro and found.bairro != neighborhood:
            return self._reject("neighborhood_mismatch", cep=digits)

        return AddressVerified(address=found)

    @staticmethod
    def _reject(code: str, *, cep: str | None = None) -> AddressRejected:
        log.warning("address.rejected", extra={"code": code, "cep": cep})
        return AddressRejected(code=code, reason=MESSAGES[code])
