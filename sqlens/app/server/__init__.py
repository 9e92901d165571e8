"""HTTP server for sqlens."""

from sqlens.app.server.main import create_app

__all__ = ["create_app"]
