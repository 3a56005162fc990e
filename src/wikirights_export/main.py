# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides the export command and a logging status command

from pathlib import Path
from typing import Any

import asyncclick as click
from rich.console import Console

from wikirights_export.config import Config, get_config
from wikirights_export.core.service import ExportAborted, ExportService
from wikirights_export.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logger,
    get_logging_status,
)
from wikirights_export.utils.rich_tables import (
    create_export_summary_table,
    create_logging_status_table,
    print_rich_table,
)

console = Console()

EXIT_OK = 0
EXIT_ABORTED = 1


def build_run_config(base: Config, **overrides: Any) -> Config:
    """Apply CLI overrides on top of the environment configuration.

    Options left unset on the command line (None) keep their configured value.
    """
    update = {key: value for key, value in overrides.items() if value is not None}
    return base.model_copy(update=update)


@click.command()
@click.option("--api-url", help="MediaWiki api.php endpoint")
@click.option("--batch-size", type=click.IntRange(1, 500), help="Pages per listing request")
@click.option("--from", "start_from", help="Resume the page walk from this title")
@click.option("--max-pages", type=click.IntRange(min=1), help="Stop after this many listed pages")
@click.option("--include-html/--no-include-html", default=None, help="Also export the cleaned HTML body")
@click.option("--insecure", is_flag=True, help="Skip TLS certificate verification (dangerous, local dev only)")
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), help="Directory for the CSV file")
@click.option(
    "--on-fetch-error", type=click.Choice(["abort", "skip"]), help="Abort on a failed page fetch, or skip it"
)
@click.pass_context
async def export(
    ctx,
    api_url: str | None,
    batch_size: int | None,
    start_from: str | None,
    max_pages: int | None,
    include_html: bool | None,
    insecure: bool,
    output_dir: Path | None,
    on_fetch_error: str | None,
):
    """
    📚 Export every article of the wiki to a timestamped CSV file.

    Walks all main-namespace pages, strips the rendered HTML down to text and
    writes one row per article.
    """
    config = build_run_config(
        get_config(),
        api_url=api_url,
        batch_size=batch_size,
        start_from=start_from,
        max_pages=max_pages,
        include_html=include_html,
        verify_tls=False if insecure else None,
        output_dir=output_dir,
        on_fetch_error=on_fetch_error,
    )

    exit_code = await _export_async(config, ctx.obj["json_output"])
    if exit_code != EXIT_OK:
        ctx.exit(exit_code)


async def _export_async(config: Config, json_output: bool) -> int:
    """Run the export with optional UI display and return the process exit code."""
    logger = get_logger(__name__)
    service = ExportService(config)

    try:
        if json_output:
            stats = await service.run()
        else:
            with console.status("📚 Exporting wiki pages...", spinner="dots"):
                stats = await service.run()
    except ExportAborted as e:
        logger.error("Export aborted", error=str(e), exported=e.stats.exported)
        if not json_output:
            console.print(f"[red]❌ {e}[/red]")
            print_rich_table(console, create_export_summary_table(e.stats, aborted=True))
        return EXIT_ABORTED
    finally:
        await service.close()

    if not json_output:
        print_rich_table(console, create_export_summary_table(stats))
    return EXIT_OK


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    # --json forces production mode, otherwise WIKIRIGHTS_EXPORT_LOG_MODE decides
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    📦 wikirights-export - dump a MediaWiki site's articles to CSV
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(export)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
