"""HTTP surface: mounts the route blueprints on the app."""

from __future__ import annotations

from flask import Flask


def join_prefix(*parts: str) -> str | None:
    """Join URL prefix segments; ``None`` when all of them are empty."""
    path = "/".join(p.strip("/") for p in parts if p and p.strip("/"))
    return f"/{path}" if path else None


def init_app(app: Flask) -> None:
    """Register every blueprint listed in :data:`cadastro.api.routes.REGISTRY`.

    ``API_BASE_PREFIX`` is empty by default so the routes live at the root; a
    reverse proxy can mount the service lower without touching the routes.
    """
    from cadastro.api.routes import REGISTRY

    base = app.config.get("API_BASE_PREFIX", "")
    for blueprint, prefix in REGISTRY:
        app.register_blueprint(blueprint, url_prefix=join_prefix(base, prefix))


__all__ = ["init_app", "join_prefix"]
