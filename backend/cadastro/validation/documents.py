"""Checksum validation for Brazilian tax identifiers (CPF and CNPJ).

Both documents end in two mod-11 check digits computed over the preceding
digits. CPF digits are computed here; the CNPJ check is delegated to
:mod:`validate_docbr`. Inputs may carry the usual punctuation
(``123.456.789-09``, ``11.222.333/0001-81``); everything that is not a digit is discarded first.
"""

from __future__ import annotations

import re

from validate_docbr import CNPJ

_NON_DIGITS = re.compile(r"[^0-9]")

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_cnpj = CNPJ()


def only_digits(raw: str | None) -> str:
    """Return ``raw`` with every non-digit character removed."""
    return _NON_DIGITS.sub("", raw or "")


def _is_repeated(digits: str) -> bool:
    return len(set(digits)) == 1


def _cpf_check_digit(total: int) -> int:
    check = (total * 10) % 11
    return 0 if check == 10 else check


def is_valid_cpf(raw: str | None) -> bool:
    """Validate an individual taxpayer id (CPF).

    :param raw: CPF, formatted or digits-only.
    :type raw: str | None
    :returns: ``True`` when 11 digits remain, they are not all identical and
        both check digits match.
    :rtype: bool
    """
    digits = only_digits(raw)
    if len(digits) != CPF_LENGTH or _is_repeated(digits):
        return False

    base = [int(d) for d in digits[:9]]

    first = _cpf_check_digit(sum(d * w for d, w in zip(base, range(10, 1, -1))))
    second_total = sum(d * w for d, w in zip(base, range(11, 2, -1))) + first * 2
    second = _cpf_check_digit(second_total)

    return digits[9] == str(first) and digits[10] == str(second)


def is_valid_cnpj(raw: str | None) -> bool:
    """Validate a business taxpayer id (CNPJ).

    :param raw: CNPJ, formatted or digits-only.
    :type raw: str | None
    :returns: ``True`` when 14 digits remain, they are not all identical and
        both check digits match.
    :rtype: bool
    """
    digits = only_digits(raw)
    if len(digits) != CNPJ_LENGTH or _is_repeated(digits):
        return False
    return bool(_cnpj.validate(digits))


__all__ = ["only_digits", "is_valid_cpf", "is_valid_cnpj", "CPF_LENGTH", "CNPJ_LENGTH"]
