"""Cross-origin policy for the public endpoints."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from cadastro.core.logger import REQUEST_ID_HEADER


def parse_origins(raw: str | None) -> str | list[str]:
    """Turn ``CORS_ORIGINS`` into ``"*"`` or an explicit origin list."""
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    if not origins or "*" in origins:
        return "*"
    return origins


def init_app(app: Flask) -> None:
    """Let browsers on ``CORS_ORIGINS`` call ``/ping`` and ``/cadastrar``.

    Credentials are only allowed with an explicit origin list. The request id
    header is exposed so front-ends can quote it when reporting a failure.
    """
    origins = parse_origins(app.config.get("CORS_ORIGINS"))
    CORS(
        app,
        origins=origins,
        methods=["GET", "POST", "OPTIONS"],
        expose_headers=[REQUEST_ID_HEADER],
        supports_credentials=origins != "*",
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
