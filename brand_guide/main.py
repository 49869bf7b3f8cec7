"""
Brand Guide Pipeline - CLI Entry Point.
Command line surface using Click and Rich.
"""

import sys
import asyncio
import logging
from pathlib import Path
from functools import wraps
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from brand_guide import __version__
from brand_guide.config.settings import get_settings
from brand_guide.models.schemas import validate_url
from brand_guide.pipeline.orchestrator import (
    STRATEGY_AUTO,
    STRATEGY_CHOICES,
    BrandGuidePipeline,
)
from brand_guide.utils.errors import BrandGuideError, ErrorHandler
from brand_guide.utils.logger import setup_logging

# Results go to stdout; progress, tables and errors go to stderr
err_console = Console(stderr=True)

GUIDE_FILENAME = "brand-guide.md"
PROFILE_FILENAME = "brand-profile.json"

# =============================================================================
# Helper Functions
# =============================================================================

def async_command(f):
    """Decorator to run async click commands."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))
    return wrapper


def configure_logging(verbose: bool):
    """Configure logging based on verbosity and settings."""
    settings = get_settings()
    level = "DEBUG" if verbose else settings.log_level
    setup_logging(
        level=level,
        json_format=settings.log_json,
        handler=RichHandler(console=err_console, rich_tracebacks=True),
    )


def fail(label: str, error: Exception):
    """Print a red error line and exit with status 1."""
    category = ErrorHandler.categorize_error(error)
    err_console.print(f"[bold red]{label}:[/bold red] {escape(str(error))} [dim]({category})[/dim]")
    sys.exit(1)


def checked_url(url: str) -> str:
    try:
        return validate_url(url)
    except ValueError as e:
        fail("Invalid URL", e)


def spinner():
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    )

# =============================================================================
# CLI Group
# =============================================================================

@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', is_flag=True, help='Detailed logging')
def cli(verbose: bool):
    """Brand Guide Pipeline"""
    configure_logging(verbose)

# =============================================================================
# Commands
# =============================================================================

@cli.command()
@click.argument('url')
@click.option('--output', type=click.Path(dir_okay=False), default=None, help='Write the Markdown to this file')
@click.option('--strategy', type=click.Choice(STRATEGY_CHOICES), default=STRATEGY_AUTO, help='Extraction strategy order')
@async_command
async def guide(url: str, output: Optional[str], strategy: str):
    """
    Extract brand intelligence and generate a Markdown brand guide.

    URL: The business homepage (http:// or https://)
    """
    url = checked_url(url)

    try:
        async with BrandGuidePipeline(settings=get_settings()) as pipeline:
            with spinner() as progress:
                progress.add_task(f"[cyan]Generating brand guide for {url}...", total=None)
                markdown = await pipeline.run_guide_flow(url, strategy=strategy)
    except BrandGuideError as e:
        fail("Brand guide failed", e)

    if output:
        Path(output).write_text(markdown + "\n", encoding="utf-8")
        err_console.print(f"[green]✓[/green] Brand guide written to {escape(output)}")
    else:
        click.echo(markdown)


@cli.command()
@click.argument('url')
@async_command
async def profile(url: str):
    """
    Generate a brand profile with Claude's web fetch tool.
    Outputs JSON to stdout.
    """
    url = checked_url(url)

    try:
        async with BrandGuidePipeline(settings=get_settings()) as pipeline:
            with spinner() as progress:
                progress.add_task(f"[cyan]Fetching brand profile for {url}...", total=None)
                result = await pipeline.run_profile_flow(url)
    except BrandGuideError as e:
        fail("Brand profile failed", e)

    click.echo(result.to_json())


@cli.command()
@click.argument('url')
@click.option('--strategy', type=click.Choice(STRATEGY_CHOICES), default=STRATEGY_AUTO, help='Extraction strategy order')
@async_command
async def extract(url: str, strategy: str):
    """
    Run extraction only.
    Outputs the normalized brand intelligence JSON to stdout.
    """
    url = checked_url(url)

    try:
        async with BrandGuidePipeline(settings=get_settings()) as pipeline:
            with spinner() as progress:
                progress.add_task(f"[cyan]Extracting brand intelligence for {url}...", total=None)
                brand = await pipeline.extract(url, strategy=strategy)
    except BrandGuideError as e:
        fail("Extraction failed", e)

    click.echo(brand.to_json())


@cli.command()
@click.argument('url')
@click.option('--output-dir', default='outputs', help='Directory for brand-guide.md and brand-profile.json')
@async_command
async def report(url: str, output_dir: str):
    """
    Generate the brand guide and brand profile concurrently.

    Each half is written when it succeeds; exits non-zero only if both fail.
    """
    url = checked_url(url)

    err_console.print(Panel.fit(f"[bold blue]Brand Report[/bold blue]\nTarget: [cyan]{escape(url)}[/cyan]"))
    start_time = asyncio.get_running_loop().time()

    async with BrandGuidePipeline(settings=get_settings()) as pipeline:
        with spinner() as progress:
            progress.add_task("[cyan]Running guide and profile flows...", total=None)
            result = await pipeline.run(url)

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    errors = result.errors or {}

    table = Table(title="Report Summary", show_header=False)
    if result.markdown is not None:
        guide_path = out / GUIDE_FILENAME
        guide_path.write_text(result.markdown + "\n", encoding="utf-8")
        table.add_row("Brand Guide", "[green]Success[/green]", str(guide_path))
    else:
        table.add_row("Brand Guide", "[red]Failed[/red]", escape(errors.get("guide", "")))

    if result.profile is not None:
        profile_path = out / PROFILE_FILENAME
        profile_path.write_text(result.profile.to_json() + "\n", encoding="utf-8")
        table.add_row("Brand Profile", "[green]Success[/green]", str(profile_path))
    else:
        table.add_row("Brand Profile", "[red]Failed[/red]", escape(errors.get("profile", "")))

    duration = asyncio.get_running_loop().time() - start_time
    table.add_row("Duration", f"{duration:.2f}s", "")
    err_console.print(table)

    if not result.succeeded:
        err_console.print("[bold red]Error:[/bold red] both the brand guide and the brand profile failed")
        sys.exit(1)


@cli.command()
def validate_setup():
    """Check the API key and show the resolved configuration."""
    err_console.print("[bold]Validating Setup...[/bold]")

    settings = get_settings()

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details")

    try:
        key = settings.require_api_key()
        table.add_row("Anthropic API Key", "[green]Pass[/green]", f"configured ({len(key)} chars)")
        key_ok = True
    except BrandGuideError as e:
        table.add_row("Anthropic API Key", "[red]Fail[/red]", escape(str(e)))
        key_ok = False

    table.add_row("Extraction Model", "[blue]Info[/blue]", settings.extraction_model)
    table.add_row("Brand Guide Model", "[blue]Info[/blue]", settings.brand_guide_model)
    table.add_row("Model Timeout", "[blue]Info[/blue]", f"{settings.web_fetch_timeout_ms}ms")
    table.add_row("Page Fetch Timeout", "[blue]Info[/blue]", f"{settings.page_fetch_timeout_seconds}s")
    table.add_row("Text Cap", "[blue]Info[/blue]", f"{settings.extraction_text_max_length} chars")

    err_console.print(table)

    if not key_ok:
        sys.exit(1)

if __name__ == "__main__":
    cli()
