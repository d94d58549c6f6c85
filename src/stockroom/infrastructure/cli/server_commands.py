"""CLI command that runs the HTTP server."""

from __future__ import annotations

import click
import structlog
import uvicorn

from stockroom.infrastructure.api.app import create_app
from stockroom.infrastructure.config import ConfigurationError, Settings
from stockroom.infrastructure.logging import configure_logging

logger = structlog.get_logger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Bind host (env: STOCKROOM_HOST).")
@click.option(
    "--port",
    default=None,
    type=click.IntRange(1, 65535),
    help="Bind port (env: STOCKROOM_PORT).",
)
@click.option("--log-level", default=None, help="Log level (env: STOCKROOM_LOG_LEVEL).")
@click.option("--json-logs/--console-logs", "log_json", default=None, help="Log format.")
@click.option("--seed/--no-seed", default=None, help="Start with the bootstrap catalog.")
def serve(
    host: str | None,
    port: int | None,
    log_level: str | None,
    log_json: bool | None,
    seed: bool | None,
) -> None:
    """Run the inventory API."""
    try:
        settings = Settings.from_env().with_overrides(
            host=host, port=port, log_level=log_level, log_json=log_json, seed=seed
        )
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))

    configure_logging(settings.log_level, settings.log_json)
    app = create_app(seed=settings.seed)

    logger.info(
        "Starting server",
        host=settings.host,
        port=settings.port,
        seeded=settings.seed,
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
