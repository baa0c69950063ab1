"""HTTP API for the Contract Audit System."""

from .app import app, create_app

__all__ = ["app", "create_app"]
