"""
DTOs for RegistrationService.

Contracts for the buyer/seller sign-up flow: the raw submission going in and
the confirmation coming out.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationIn:
    """
    Raw registration submission, exactly as the client sent it.

    :param cnpj: Business taxpayer id (formatted or digits-only).
    :type cnpj: str
    :param cpf: Individual taxpayer id (formatted or digits-only).
    :type cpf: str
    :param name: Registrant name.
    :type name: str
    :param cell_phone: Mobile number, 11 digits once normalized.
    :type cell_phone: str
    :param telephone: Landline number, 10 digits once normalized.
    :type telephone: str
    :param email: Contact e-mail.
    :type email: str
    :param confirm_email: Must equal ``email``.
    :type confirm_email: str
    :param cep: Postal code in ``NNNNN-NNN`` form.
    :type cep: str
    :param public_place: Street name.
    :type public_place: str
    :param neighborhood: Neighborhood.
    :type neighborhood: str
    :param city: City.
    :type city: str
    :param state: Two-letter state code.
    :type state: str
    :param number: Optional street number.
    :type number: str
    :param complement: Optional address complement.
    :type complement: str
    """

    cnpj: str = ""
    cpf: str = ""
    name: str = ""
    cell_phone: str = ""
    telephone: str = ""
    email: str = ""
    confirm_email: str = ""
    cep: str = ""
    public_place: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    number: str = ""
    complement: str = ""


REQUIRED_FIELDS: tuple[str, ...] = (
    "cnpj",
    "cpf",
    "name",
    "cell_phone",
    "telephone",
    "email",
    "confirm_email",
    "cep",
    "public_place",
    "neighborhood",
    "city",
    "state",
)

ALL_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(RegistrationIn))


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationOut:
    """
    Registration result.

    :param message: Confirmation for the client.
    :type message: str
    :param address_verified: ``False`` only when the lookup rejected the
        address and enforcement is disabled.
    :type address_verified: bool
    """

    message: str
    address_verified: bool = True
