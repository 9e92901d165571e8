"""FastAPI application exposing the analysis pipeline."""

import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sqlens import __version__
from sqlens.app.server.routes import analyze_router
from sqlens.config import SqlensConfig, find_config, load_config
from sqlens.core import QueryAnalyzer


def _resolve_config(config_path: Path | None) -> SqlensConfig:
    if config_path is None:
        env_path = os.environ.get("SQLENS_CONFIG_PATH")
        if env_path:
            config_path = Path(env_path)
        else:
            config_path = find_config()
    if config_path is None:
        return SqlensConfig()
    return load_config(config_path)


def create_app(
    config: SqlensConfig | None = None, config_path: Path | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    The analyzer is built once here and shared by every request.
    """
    if config is None:
        config = _resolve_config(config_path)

    app = FastAPI(
        title="sqlens",
        description="Visualize SQL query structure as a graph of tables and joins",
        version=__version__,
    )

    # CORS for local development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:4200", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.analyzer = QueryAnalyzer.from_config(config)

    app.include_router(analyze_router, prefix="/api/sql", tags=["sql"])

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
