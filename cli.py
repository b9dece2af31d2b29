"""
CLI tool for the library catalog service.

Provides commands for running the HTTP server, inspecting the registered
routes and creating the database schema without Alembic.
"""

import asyncio

import typer
import uvicorn
from fastapi.routing import APIRoute
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from catalog import application
from catalog.settings import app_settings
from catalog.storage.db import create_tables, engine

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="catalog-cli",
    help="Library Catalog CLI - Run the API and manage its database",
    add_completion=False,
)
console = Console()


def _iter_api_routes(routes, prefix: str = ""):
    """
    Yield (path, route) for every APIRoute, descending into included routers.

    Newer FastAPI releases keep included routers as a single entry in
    `app.routes` holding the original router and its include prefix.
    """
    for route in routes:
        if isinstance(route, APIRoute):
            yield prefix + route.path, route
            continue
        nested = getattr(route, "original_router", None)
        if nested is not None:
            context = getattr(route, "include_context", None)
            yield from _iter_api_routes(
                nested.routes, prefix + getattr(context, "prefix", "")
            )


@typer_app.command(name="serve")
def serve(
    host: str = typer.Option(
        None, "--host", "-h", help="Bind address (defaults to HOST setting)"
    ),
    port: int = typer.Option(
        None, "--port", "-p", help="Bind port (defaults to PORT setting)"
    ),
    reload: bool = typer.Option(
        False, "--reload", help="Restart the server when code changes"
    ),
):
    """
    Run the HTTP API with uvicorn.

    Example:
        python cli.py serve --port 4000
    """
    uvicorn.run(
        "catalog:application",
        factory=True,
        host=host or app_settings.HOST,
        port=port or app_settings.PORT,
        reload=reload,
        log_level=app_settings.LOG_LEVEL.lower(),
    )


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered HTTP routes.

    Example:
        python cli.py routes
    """
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registered HTTP Routes[/bold cyan]",
            border_style="cyan",
        )
    )
    console.print()

    table = Table("Methods", "Path", "Endpoint", title="HTTP Routes")

    api_routes = sorted(
        _iter_api_routes(application().routes), key=lambda item: item[0]
    )
    for path, route in api_routes:
        table.add_row(
            f"[green]{', '.join(sorted(route.methods))}[/green]",
            path,
            f"{route.endpoint.__module__}.[yellow]{route.name}[/yellow]",
        )

    console.print(table)
    console.print()
    console.print(f"[bold]Summary:[/bold] {len(api_routes)} routes registered")
    console.print()


@typer_app.command(name="init-db")
def init_db():
    """
    Create all catalog tables on the configured database.

    Intended for local development; deployed databases are managed with
    `alembic upgrade head`.

    Example:
        python cli.py init-db
    """
    async def _run() -> None:
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    console.print(
        Panel.fit(
            "[green]✓ Tables created[/green]",
            border_style="green",
            title="Success",
        )
    )


if __name__ == "__main__":
    typer_app()
