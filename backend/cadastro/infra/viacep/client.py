"""HTTP client for the ViaCEP postal code lookup service."""

from __future__ import annotations

import logging
from typing import Any

import requests

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://viacep.com.br/ws"
DEFAULT_TIMEOUT = 5.0


class ViaCepError(Exception):
    """Raised when a lookup cannot produce a JSON object (network, status, body)."""


class ViaCepClient:
    """
    Thin wrapper around ``GET {base_url}/{cep}/json/``.

    The client only deals with transport concerns: it returns the decoded JSON
    object as-is and leaves the interpretation of its fields to callers.

    :param base_url: Service root, without trailing slash.
    :type base_url: str
    :param timeout: Seconds before connect/read is abandoned.
    :type timeout: float
    :param session: Optional :class:`requests.Session` for connection reuse.
    :type session: requests.Session | None
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, cep: str) -> str:
        return f"{self.base_url}/{cep}/json/"

    def lookup(self, cep: str) -> dict[str, Any]:
        """
        Fetch the raw lookup payload for a digits-only CEP.

        :param cep: Eight-digit postal code without hyphen.
        :type cep: str
        :returns: Decoded JSON object.
        :rtype: dict[str, Any]
        :raises ViaCepError: On timeout, connection failure, HTTP error status,
            or a body that is not a JSON object.
        """
        url = self.url_for(cep)
        log.debug("viacep.lookup", extra={"cep": cep})
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            raise ViaCepError(f"lookup request failed: {exc}") from exc
        except ValueError as exc:
            raise ViaCepError("lookup returned a non-JSON body") from exc

        if not isinstance(data, dict):
            raise ViaCepError("lookup returned a non-object JSON body")
        return data


__all__ = ["ViaCepClient", "ViaCepError", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT"]
