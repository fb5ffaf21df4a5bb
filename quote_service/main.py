from __future__ import annotations

import asyncio
import sys
from typing import Optional

import psycopg
import typer
import uvicorn

from quote_service.api.app import create_app
from quote_service.config import get_settings
from quote_service.infrastructure.db_factory import check_database
from quote_service.utils.logging import configure_logging

app = typer.Typer(help="Quote Service CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"DB={settings.db_user}@{settings.db_host}:{settings.db_port}/{settings.db_name} | "
        f"quote_api={settings.quote_api_url} timeout={settings.quote_api_timeout_seconds}s | "
        f"listen={settings.server_host}:{settings.server_port}"
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Override listen host (default from settings)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Override listen port (default from settings)."),
) -> None:
    """
    Run the HTTP service.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    uvicorn.run(
        create_app(settings),
        host=host or settings.server_host,
        port=port or settings.server_port,
        log_config=None,
    )


@app.command("check-db")
def check_db() -> None:
    """
    Verify the recipients database is reachable.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        asyncio.run(check_database(settings))
    except psycopg.OperationalError as exc:
        typer.echo(f"Database unreachable: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Database {settings.db_name}@{settings.db_host} is reachable.")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
