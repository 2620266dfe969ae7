"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from record_history.config import Config
from record_history.datasources import DataSource, SpeedrunDataSource
from record_history.api import router
from record_history.api.dependencies import set_datasource

logger = logging.getLogger(__name__)


def create_datasource(config: Config) -> SpeedrunDataSource:
    """Create the speedrun.com data source described by the configuration."""
    return SpeedrunDataSource(
        leaderboard_filter=config.leaderboard_filter(),
        api_url=config.speedrun_api_url,
        vary=config.vary,
        timeout=config.request_timeout,
    )


def create_app(
    config: Config | None = None,
    datasource: DataSource | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application configuration. If None, loads from environment.
        datasource: Data source to serve from. If None, built from config.

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = Config.from_env()

    if datasource is None:
        datasource = create_datasource(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        # Startup
        logger.info("Starting Record History API")
        logger.info(f"Using speedrun.com API: {config.speedrun_api_url}")
        logger.info(f"Game {config.game_id}, category {config.category_id}")

        set_datasource(datasource)

        yield

        # Shutdown
        logger.info("Shutting down...")
        await datasource.close()

    app = FastAPI(
        title="Record History API",
        description="World record history and record durations for a speedrun.com leaderboard",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Include API routes
    app.include_router(router)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app
