"""HTTP helper utilities for tests."""

from __future__ import annotations


def json_headers(request_id: str | None = None) -> dict[str, str]:
    """Return standard JSON headers.

    Parameters
    ----------
    request_id:
        Optional correlation id to send as ``X-Request-ID``.

    Returns
    -------
    dict[str, str]
        HTTP headers dictionary.
    """

    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if request_id:
        headers["X-Request-ID"] = request_id
    return headers
