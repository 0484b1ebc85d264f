"""
snowhook - FastAPI Application
Main entry point for the Alertmanager to ServiceNow webhook service.
"""

import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import click
import uvicorn
from fastapi import FastAPI

from snowhook.config.exceptions import ConfigurationError
from snowhook.config.servicenow_config import load_config
from snowhook.config.settings import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_LISTEN_ADDRESS,
    Settings,
    get_settings,
)
from snowhook.controllers.system_controller import router as system_router
from snowhook.controllers.webhook_controller import router as webhook_router
from snowhook.integrations.servicenow.client import ServiceNowClient
from snowhook.services.ingestion_pipeline import IngestionPipeline
from snowhook.services.ticket_client import TicketClient
from snowhook.utils.logger import get_module_logger, setup_logging
from snowhook.utils.version import VERSION

logger = get_module_logger(__name__)


def create_ticket_client(settings: Settings) -> ServiceNowClient:
    """
    Load the ServiceNow configuration file and build the client.

    Raises:
        ConfigurationError: If the file is unreadable or invalid, or the
            credentials cannot be used to build a client
    """
    config = load_config(settings.config_file)
    client = ServiceNowClient.from_config(config.service_now, timeout=settings.servicenow_timeout)
    logger.info("ServiceNow config loaded")
    return client


def create_app(
    settings: Optional[Settings] = None,
    ticket_client: Optional[TicketClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (defaults to the cached environment settings)
        ticket_client: Client used to create incidents. When omitted, one is
            built from the configuration file during application startup.

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        # Factory mode (uvicorn --factory) never goes through main()
        setup_logging(settings.log_level)

        if app.state.ingestion_pipeline is None:
            # Fail fast: an unusable config means we never serve requests
            app.state.ingestion_pipeline = IngestionPipeline(create_ticket_client(settings))

        logger.info(f"Starting webhook, version {VERSION}")
        try:
            yield
        finally:
            pipeline = app.state.ingestion_pipeline
            app.state.ingestion_pipeline = None
            await pipeline.ticket_client.aclose()
            logger.info("Webhook stopped")

    app = FastAPI(
        title="Alertmanager ServiceNow Webhook",
        description="Creates ServiceNow incidents from Prometheus Alertmanager notifications",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.ingestion_pipeline = IngestionPipeline(ticket_client) if ticket_client is not None else None

    app.include_router(webhook_router)
    app.include_router(system_router)

    return app


@click.command()
@click.option(
    "--config.file",
    "config_file",
    default=None,
    help=f"ServiceNow configuration file. [env SNOWHOOK_CONFIG_FILE, default: {DEFAULT_CONFIG_FILE}]",
)
@click.option(
    "--web.listen-address",
    "listen_address",
    default=None,
    help=f"The address to listen on for HTTP requests. [env SNOWHOOK_LISTEN_ADDRESS, default: {DEFAULT_LISTEN_ADDRESS}]",
)
@click.option(
    "--log.level",
    "log_level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Only log messages with the given severity or above. [env SNOWHOOK_LOG_LEVEL, default: INFO]",
)
@click.version_option(VERSION, prog_name="alertmanager-webhook-servicenow")
@click.help_option("-h", "--help")
def main(config_file: Optional[str], listen_address: Optional[str], log_level: Optional[str]) -> None:
    """Receive Alertmanager webhooks and open one ServiceNow incident per alert."""
    # Flags override SNOWHOOK_* environment variables; unset flags fall through to them
    overrides = {
        name: value
        for name, value in (
            ("config_file", config_file),
            ("listen_address", listen_address),
            ("log_level", log_level),
        )
        if value is not None
    }
    try:
        settings = Settings(**overrides)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    setup_logging(settings.log_level)
    logger.info(f"Loading ServiceNow config from {settings.config_file}")

    try:
        ticket_client = create_ticket_client(settings)
    except ConfigurationError as e:
        logger.critical(f"Error creating the ServiceNow client: {e}")
        sys.exit(1)

    app = create_app(settings, ticket_client=ticket_client)

    logger.info(f"listening on: {settings.listen_address}")
    uvicorn.run(
        app,
        host=settings.listen_host,
        port=settings.listen_port,
        log_config=None,  # keep the logging configured above
    )


if __name__ == "__main__":
    main()
