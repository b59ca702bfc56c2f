"""Blueprint registry for the public routes."""

from __future__ import annotations

from flask import Blueprint

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .ping import bp as ping_bp
from .registrations import bp as registrations_bp

# Each tuple: (blueprint, url_prefix_relative_to_base)
REGISTRY: list[tuple[Blueprint, str]] = [
    (ping_bp, ""),  # -> /ping
    (registrations_bp, ""),  # -> /cadastrar
]
