"""
DTOs for AddressVerifier.

A verification either succeeds with the canonical address returned by the
postal lookup, or fails with a client-facing reason. The two outcomes are
distinct types so callers branch on the variant instead of probing for an
optional error attribute.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

# --------------------------------------------------------------------------- #
# Lookup payload
# --------------------------------------------------------------------------- #

REQUIRED_LOOKUP_FIELDS = ("cep", "logradouro", "bairro", "localidade", "uf")


@dataclass(frozen=True, slots=True)
class ViaCepAddress:
    """
    Canonical address returned by the postal lookup.

    :param cep: Postal code as formatted by the service (``01310-100``).
    :type cep: str
    :param logradouro: Street name.
    :type logradouro: str
    :param bairro: Neighborhood (may be empty for small towns).
    :type bairro: str
    :param localidade: City.
    :type localidade: str
    :param uf: Two-letter state code.
    :type uf: str
    """

    cep: str
    logradouro: str
    bairro: str
    localidade: str
    uf: str

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> ViaCepAddress | None:
        """
        Build an address when every required field is present and a string.

        :param data: Decoded lookup JSON.
        :type data: Mapping[str, Any]
        :returns: Address, or ``None`` when the payload is malformed.
        :rtype: ViaCepAddress | None
        """
        if not all(isinstance(data.get(key), str) for key in REQUIRED_LOOKUP_FIELDS):
            return None
        return cls(**{key: data[key] for key in REQUIRED_LOOKUP_FIELDS})


def is_not_found(data: Mapping[str, Any]) -> bool:
    """ViaCEP flags unknown codes with ``"erro": true`` (or ``"true"`` in newer releases)."""
    flag = data.get("erro")
    return flag is True or (isinstance(flag, str) and flag.strip().lower() == "true")


# --------------------------------------------------------------------------- #
# Verification outcome
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class AddressVerified:
    """Successful verification carrying the canonical lookup address."""

    address: ViaCepAddress
    ok: bool = True


@dataclass(frozen=True, slots=True)
class AddressRejected:
    """
    Failed verification.

    :param code: Stable machine-readable reason (e.g. ``"city_mismatch"``).
    :type code: str
    :param reason: Client-facing message.
    :type reason: str
    """

    code: str
    reason: str
    ok: bool = False


AddressCheck = Union[AddressVerified, AddressRejected]
