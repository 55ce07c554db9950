"""
Command line interface for the site generator.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .api import AcquisitionError, scrape_site
from .config import ConfigError, SiteConfig, get_secrets, load_config, validate_config
from .config.builder import build_config_document
from .pipeline import describe_config, generate_site
from .publish import PublishError, publish_project
from .util import write_text_file
from .web import ConflictError, FileSystemError, MaterializeReport, TemplateMissingError
from .web.materializer import DEFAULT_OUTPUT_ROOT

console = Console()
app = typer.Typer(help="Generate website projects from company config documents.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("SITEGEN_LOG_LEVEL")
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_config_path(value: Path) -> Path:
    """Ensure config path exists and return absolute path."""
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No config file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Config path must be a file, got directory: {resolved}")
    return resolved


def _resolve_template_dir(value: Optional[Path]) -> Path:
    template = value or get_secrets().template_dir
    if template is None:
        raise typer.BadParameter("Pass --template or set SITEGEN_TEMPLATE_DIR.")
    return Path(template).expanduser().resolve()


def _resolve_output_dir(value: Optional[Path]) -> Path:
    output = value or get_secrets().output_dir or DEFAULT_OUTPUT_ROOT
    return Path(output).expanduser().resolve()


def _load_config_or_exit(path: Path) -> SiteConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _print_rows(title: str, rows: Iterable[tuple[str, str]]) -> None:
    table = Table(title=title)
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in rows:
        table.add_row(key, value)
    console.print(table)


def _generate_or_exit(config: SiteConfig, template: Path, output: Path, force: bool) -> MaterializeReport:
    try:
        return generate_site(config, template, output, force=force)
    except TemplateMissingError as exc:
        console.print(f"[bold red]Template error:[/] {exc}")
        raise typer.Exit(code=1) from exc
    except ConflictError as exc:
        console.print(f"[bold red]Output conflict:[/] {exc}")
        raise typer.Exit(code=1) from exc
    except FileSystemError as exc:
        console.print(f"[bold red]Filesystem error:[/] {exc}")
        console.print("[yellow]The output directory is incomplete; regenerate it or remove it by hand.[/]")
        raise typer.Exit(code=1) from exc


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show sitegen version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]sitegen[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]sitegen[/] is ready. Run [cyan]sitegen generate --config site.json --template path/to/template[/].",
        )


@app.command()
def validate(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to the site config JSON.",
        callback=_resolve_config_path,
    ),
) -> None:
    """
    Validate a site config and show the resolved values.
    """
    site_config = _load_config_or_exit(config)
    _print_rows("Site Configuration Summary", describe_config(site_config))
    console.print("[bold green]Config validated successfully.[/]")


@app.command()
def generate(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to the site config JSON.",
        callback=_resolve_config_path,
    ),
    template: Optional[Path] = typer.Option(
        None,
        "--template",
        "-t",
        help="Template project directory (defaults to SITEGEN_TEMPLATE_DIR).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory that receives the generated project (defaults to SITEGEN_OUTPUT_DIR).",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an output directory generated for another company.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Validate configuration and show a plan without writing files.",
    ),
) -> None:
    """
    Generate a site project from a config file.
    """
    logger.info("Loading configuration from %s", config)
    site_config = _load_config_or_exit(config)
    template_dir = _resolve_template_dir(template)
    output_dir = _resolve_output_dir(output)

    _print_rows("Site Configuration Summary", describe_config(site_config))
    if dry_run:
        console.print(f"[bold blue]Dry run complete.[/] Would write {output_dir / site_config.slug}")
        return

    report = _generate_or_exit(site_config, template_dir, output_dir, force)
    _print_rows("Generation Summary", report.summary_rows())
    console.print(f"[bold green]Site generated in:[/] {report.root}")


@app.command()
def scrape(
    url: str = typer.Argument(..., help="Company web page to scrape."),
    out: Path = typer.Option(
        Path("site.json"),
        "--out",
        help="Where to write the generated config document.",
    ),
) -> None:
    """
    Scrape a company page and write a site config document for it.
    """
    try:
        result = scrape_site(url, api_key=get_secrets().firecrawl_key)
    except AcquisitionError as exc:
        console.print(f"[bold red]Scrape failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    document = build_config_document(result, url)
    try:
        target = write_text_file(out, json.dumps(document, indent=2, ensure_ascii=False) + "\n")
    except OSError as exc:
        console.print(f"[bold red]Filesystem error:[/] Failed to write {out}: {exc}")
        raise typer.Exit(code=1) from exc
    console.print(f"[bold green]Config written to[/] {target}")


@app.command()
def agent(
    url: str = typer.Argument(..., help="Company web page to build a site for."),
    template: Optional[Path] = typer.Option(
        None,
        "--template",
        "-t",
        help="Template project directory (defaults to SITEGEN_TEMPLATE_DIR).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory that receives the generated project (defaults to SITEGEN_OUTPUT_DIR).",
    ),
    publish: bool = typer.Option(
        True,
        "--publish/--no-publish",
        help="Create a GitHub repository and push the generated project.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an output directory generated for another company.",
    ),
) -> None:
    """
    Scrape a page, build a config, generate the site and publish it.
    """
    secrets = get_secrets()
    template_dir = _resolve_template_dir(template)
    output_dir = _resolve_output_dir(output)

    console.print(f"[cyan]1. Scraping[/] {url}")
    try:
        result = scrape_site(url, api_key=secrets.firecrawl_key)
    except AcquisitionError as exc:
        console.print(f"[bold red]Scrape failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    console.print("[cyan]2. Building config[/]")
    try:
        site_config = validate_config(build_config_document(result, url))
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc
    console.print(f"   Company: {site_config.company.name}, primary color {site_config.branding.primary_color}")

    console.print("[cyan]3. Generating site[/]")
    report = _generate_or_exit(site_config, template_dir, output_dir, force)
    console.print(f"   Site generated in {report.root}")

    if not publish:
        console.print("[bold green]Done.[/] Publishing skipped.")
        return

    console.print("[cyan]4. Publishing[/]")
    try:
        repo_url = publish_project(
            report.root,
            report.slug,
            token=secrets.github_token,
            owner=secrets.github_owner,
            description=f"{site_config.company.name} - Generert nettside",
        )
    except PublishError as exc:
        console.print(f"[bold red]Publish failed:[/] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold green]Done.[/] Repo: {repo_url}")
    console.print(f"Deploy: https://vercel.com/new/import/?repo={report.slug}")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
