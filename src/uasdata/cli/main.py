from __future__ import annotations

import os
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from uasdata.config.store_config import StoreConfig
from uasdata.core.errors import UasDataError
from uasdata.store.update import has_update, retrieve_remote_version
from uasdata.utils.logging import configure_logging, get_logger


@click.group()
@click.option(
    "--log-level",
    default=lambda: os.getenv("LOG_LEVEL", "WARNING"),
    show_default="WARNING",
    help="Logging level.",
)
@click.option("--json-logs/--console-logs", default=False, help="Log renderer.")
def cli(log_level: str, json_logs: bool) -> None:
    """UAS data store tools."""
    configure_logging(level=log_level, json_output=json_logs)


@cli.command("check-version")
@click.option("--current", default=None, help="Version of the UAS data in use.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML config file.",
)
def check_version(current: Optional[str], config_path: Optional[str]) -> None:
    """Print the remote UAS data version and whether it is newer."""
    logger = get_logger(__name__)
    try:
        config = (
            StoreConfig.from_yaml(config_path) if config_path else StoreConfig.from_env()
        )
        remote = retrieve_remote_version(config.version_locator, config.build_opener())
    except (UasDataError, ValidationError, yaml.YAMLError, OSError) as exc:
        logger.error("check_version_failed", error=str(exc))
        raise click.ClickException(str(exc)) from exc

    click.echo(remote)
    if current is not None:
        newer = has_update(remote, current)
        click.echo("update available" if newer else "up to date")


if __name__ == "__main__":
    cli()
