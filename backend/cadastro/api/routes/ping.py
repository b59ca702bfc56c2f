"""Liveness endpoint."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("ping", __name__)


@bp.get("/ping")
def ping():
    """Return ``pong`` as plain text."""

    return "pong", 200, {"Content-Type": "text/plain; charset=utf-8"}
