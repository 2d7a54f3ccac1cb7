"""Postboard CLI — run the server and prepare the database.

Usage:
    postboard serve                      # uvicorn on POSTBOARD_HOST:POSTBOARD_PORT
    postboard serve --port 8000 --reload
    postboard init-db                    # create missing tables
"""

from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Optional

import click
from sqlalchemy.engine import make_url

from postboard.config import Settings


def _run(coro):
    """Run an async coroutine from synchronous Click handler.

    Handles nested event loops (e.g. when invoked via Click CliRunner
    inside an existing async context like tests) by offloading to a thread.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, coro).result()


@click.group()
@click.version_option(package_name="postboard")
def cli():
    """Postboard — accounts, posts, comments, and likes."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default: POSTBOARD_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: POSTBOARD_PORT).")
@click.option("--reload", is_flag=True, help="Restart on code changes (development).")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Start the API server."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "postboard.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,
    )


@cli.command("init-db")
def init_db():
    """Create any missing tables in POSTBOARD_DATABASE_URL."""
    from postboard.db.engine import Database

    settings = Settings()

    async def _create():
        db = Database(settings.database_url)
        try:
            await db.create_all()
        finally:
            await db.dispose()

    _run(_create())
    url = make_url(settings.database_url).render_as_string(hide_password=True)
    click.secho(f"Tables ready in {url}", fg="green")


if __name__ == "__main__":
    cli()
