import logging
import secrets
from pathlib import Path
from typing import Optional

import click
import uvicorn

from recipeapp.config.provider import EnvConfigProvider
from recipeapp.logging_config import configure_logging, get_logging_config

logger = logging.getLogger("recipeapp")


@click.group()
def cli():
    """Recipe App backend."""


@cli.command()
@click.option("--host", "host", default=None, help="Bind address (default: API_HOST)")
@click.option("--port", "port", type=int, default=None, help="Bind port (default: API_PORT)")
@click.option("--reload", "reload", is_flag=True, default=False, help="Reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the REST API."""
    api_config = EnvConfigProvider().get_api_config()
    configure_logging(api_config.log_level)

    logger.info(f"Serving Recipe App on {host or api_config.host}:{port or api_config.port}")
    uvicorn.run(
        "recipeapp.main:create_app",
        factory=True,
        host=host or api_config.host,
        port=port or api_config.port,
        log_level=api_config.log_level.lower(),
        reload=reload or api_config.debug,
        log_config=get_logging_config(api_config.log_level),
    )


@cli.command()
@click.option("--path", "path", default=None, help="Key file to write (default: SECRET_KEY_FILE)")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing key file")
def genkey(path: Optional[str], force: bool):
    """Generate a random token signing key file."""
    key_file = Path(path or EnvConfigProvider().get_token_config().secret_file)
    if key_file.exists() and not force:
        raise click.ClickException(f"{key_file} already exists (use --force to overwrite)")

    key_file.parent.mkdir(parents=True, exist_ok=True)
    key_file.write_text(secrets.token_hex(64))
    click.echo(f"Wrote secret key to {key_file}")


if __name__ == "__main__":
    cli()
