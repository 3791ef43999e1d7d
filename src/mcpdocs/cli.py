"""Command line interface for mcpdocs."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from mcpdocs.config import AppConfig
from mcpdocs.corpus.scanner import CorpusScanner
from mcpdocs.errors import DocsError
from mcpdocs.index.categories import CategoryBrowser
from mcpdocs.index.search import Searcher, parse_category_filter
from mcpdocs.models import ALL_CATEGORIES, OVERVIEW, Category
from mcpdocs.render import category_values, format_category, format_no_results, format_overview
from mcpdocs.resources import ResourceCatalog
from mcpdocs.web.app import app as web_app


console = Console()
app = typer.Typer(help="mcpdocs - keyword search over local documentation")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_config(docs_dir: Path | None) -> AppConfig:
    return AppConfig(docs_dir=docs_dir if docs_dir is not None else AppConfig().docs_dir)


def _build_scanner(config: AppConfig) -> CorpusScanner:
    return CorpusScanner(config.resolve_docs_dir(Path.cwd()), extension=config.extension)


@app.command()
def search(
    query: str = typer.Argument(..., help="Keywords or phrase to look for"),
    category: str = typer.Option(ALL_CATEGORIES, "--category", "-c", help="Limit to one category"),
    docs_dir: Path = typer.Option(None, "--docs-dir", help="Documentation directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Rank documents by keyword relevance."""
    _setup_logging(verbose)
    try:
        parse_category_filter(category)
    except ValueError as exc:
        raise typer.BadParameter(f"{exc}. Choose all, {category_values()}") from exc

    config = _load_config(docs_dir)
    searcher = Searcher(_build_scanner(config), scheme=config.uri_scheme)
    results = searcher.search(query, category=category)
    if not results:
        console.print(f"[yellow]{escape(format_no_results(query, category))}[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Relevance")
    table.add_column("Document")
    table.add_column("Category")
    table.add_column("Title")
    table.add_column("Reference")
    table.add_column("First match")

    for result in results[: config.display_limit]:
        first_match = f"L{result.matches[0].line}: {result.matches[0].text}" if result.matches else ""
        table.add_row(
            f"{result.relevance:.0f}",
            escape(result.identifier),
            result.category.value,
            escape(result.title),
            escape(result.uri),
            escape(first_match[:120]),
        )

    console.print(table)
    if len(results) > config.display_limit:
        console.print(f"{len(results) - config.display_limit} additional documents found.")


@app.command()
def category(
    name: str = typer.Argument(OVERVIEW, help="Category key, or 'overview'"),
    docs_dir: Path = typer.Option(None, "--docs-dir", help="Documentation directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Browse documents by category."""
    _setup_logging(verbose)
    config = _load_config(docs_dir)
    browser = CategoryBrowser(_build_scanner(config), scheme=config.uri_scheme)

    if name == OVERVIEW:
        console.print(Markdown(format_overview(browser.overview())))
        return

    try:
        wanted = Category(name)
    except ValueError:
        wanted = None
    if wanted is None or wanted is Category.OTHER:
        raise typer.BadParameter(f"Unknown category: {name}. Choose overview, {category_values()}")

    console.print(Markdown(format_category(wanted, browser.browse(wanted))))


@app.command("list")
def list_resources(
    docs_dir: Path = typer.Option(None, "--docs-dir", help="Documentation directory"),
) -> None:
    """List every document with its reference."""
    config = _load_config(docs_dir)
    catalog = ResourceCatalog(
        _build_scanner(config), scheme=config.uri_scheme, mime_type=config.mime_type
    )
    descriptors = catalog.list_resources()
    if not descriptors:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Priority")
    table.add_column("Reference")
    table.add_column("Name")
    table.add_column("Last modified")
    for item in descriptors:
        table.add_row(f"{item.priority:.1f}", escape(item.uri), escape(item.name), item.last_modified)
    console.print(table)


@app.command()
def read(
    reference: str = typer.Argument(..., help="Document reference, e.g. docs://intro.md"),
    docs_dir: Path = typer.Option(None, "--docs-dir", help="Documentation directory"),
) -> None:
    """Print one document's raw text."""
    config = _load_config(docs_dir)
    catalog = ResourceCatalog(
        _build_scanner(config), scheme=config.uri_scheme, mime_type=config.mime_type
    )
    try:
        content = catalog.read_resource(reference)
    except DocsError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    typer.echo(content.text)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    docs_dir: Path = typer.Option(None, "--docs-dir", help="Documentation directory"),
) -> None:
    """Start the HTTP interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install it with \"python -m pip install uvicorn\""
        ) from exc

    config = _load_config(docs_dir)
    resolved_docs = config.resolve_docs_dir(Path.cwd())
    if not resolved_docs.is_dir():
        console.print("[yellow]Warning: documentation directory not found, results will be empty.[/yellow]")
    web_app.state.docs_dir = resolved_docs

    console.print(f"Starting web interface on http://{host}:{port} (docs: {escape(str(resolved_docs))})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
