"""API route modules."""

from sqlens.app.server.routes.analyze import router as analyze_router

__all__ = ["analyze_router"]
