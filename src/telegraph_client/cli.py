"""CLI for reading Telegraph pages and view counts."""

import json
from typing import Annotated

import typer
from loguru import logger

from telegraph_client.api import TelegraphApi
from telegraph_client.config import resolve_access_token
from telegraph_client.errors import TelegraphError
from telegraph_client.logging_config import configure_logging
from telegraph_client.models.account import Account
from telegraph_client.models.page import node_to_dict
from telegraph_client.operations import get_page, get_page_list, get_views

app = typer.Typer(help="Telegraph client: read pages, page lists and view counts.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


@app.command()
def page(
    path: str,
    content: bool = typer.Option(False, "--content", "-c", help="Also print the content tree"),
) -> None:
    """Show a page."""
    try:
        result = get_page(TelegraphApi(), path, return_content=content)
    except (TelegraphError, ValueError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    typer.echo(result.title)
    typer.echo(result.url)
    typer.echo(f"views: {result.views}")
    if content and result.content is not None:
        tree = [node_to_dict(node) for node in result.content]
        typer.echo(json.dumps(tree, ensure_ascii=False, indent=2))


@app.command()
def views(
    path: str,
    year: int = typer.Option(0, "--year", help="Year (2000-2100), requires --month"),
    month: int = typer.Option(0, "--month", help="Month (1-12), requires --day"),
    day: int = typer.Option(0, "--day", help="Day (1-31), requires --hour"),
    hour: int = typer.Option(-1, "--hour", help="Hour (0-24)"),
) -> None:
    """Show the number of views of a page."""
    try:
        result = get_views(TelegraphApi(), path, year=year, month=month, day=day, hour=hour)
    except (TelegraphError, ValueError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    typer.echo(str(result.views))


@app.command()
def pages(
    offset: int = typer.Option(0, "--offset", help="Sequential number of the first page"),
    limit: int = typer.Option(50, "--limit", help="Number of pages to list (0-200)"),
    token: Annotated[
        str | None,
        typer.Option("--token", "-t", help="Access token (default: env or token file)"),
    ] = None,
) -> None:
    """List the pages of an account."""
    access_token = token or resolve_access_token()
    if not access_token:
        logger.error("No access token: pass --token, set TELEGRAPH_ACCESS_TOKEN or create a token file")
        raise typer.Exit(1)

    try:
        result = get_page_list(TelegraphApi(), Account(access_token=access_token), offset=offset, limit=limit)
    except (TelegraphError, ValueError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    typer.echo(f"{result.total_count} pages")
    for item in result.pages:
        typer.echo(f"{item.path}\t{item.views}\t{item.title}")
