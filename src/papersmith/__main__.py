"""CLI entry point for papersmith."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .adapters.llm import create_llm_adapter
from .adapters.storage import FilesystemAdapter
from .config import Settings, load_settings
from .domain.errors import ConfigurationError
from .domain.models import BatchSummary
from .domain.selection import select_candidates
from .domain.services import RenamingService

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def resolve_glob_pattern(flag: str | None, settings: Settings) -> str:
    """Pick the glob pattern from the flag, else from configuration."""
    if flag and flag.strip():
        return flag
    if settings.glob_pattern:
        logger.info("No --glob-pattern given, using PAPERSMITH_GLOB_PATTERN")
        return settings.glob_pattern
    raise ConfigurationError(
        "No glob pattern: pass --glob-pattern or set PAPERSMITH_GLOB_PATTERN."
    )


def report(summary: BatchSummary) -> None:
    """Echo per-file outcomes and totals."""
    for result in summary.results:
        if result.success and result.dry_run:
            click.echo(f"~ {result.source_path.name} -> {result.target_name} (dry-run)")
        elif result.success:
            click.echo(f"✓ {result.source_path.name} -> {result.target_name}")
        else:
            click.echo(f"✗ {result.source_path}: {'; '.join(result.errors)}", err=True)

    click.echo(f"\n{summary}")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-g", "--glob-pattern", help="Files to rename, e.g. '~/Scans/*.pdf'")
@click.option("-m", "--model", help="Model to use (default: gpt-4o-mini)")
@click.option("-d", "--dry-run", is_flag=True, help="Show renames without touching files")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file path",
)
@click.version_option(__version__, "-V", "--version")
def cli(
    glob_pattern: str | None,
    model: str | None,
    dry_run: bool,
    verbose: bool,
    config: Path | None,
) -> None:
    """Papersmith - rename PDFs to YYYYMMDD-title-category.pdf using an LLM."""
    setup_logging(verbose)

    try:
        settings = load_settings(config)
        if model:
            settings.llm.model = model
        pattern = resolve_glob_pattern(glob_pattern, settings)
        llm = create_llm_adapter(settings.llm, settings.naming)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    with llm:
        candidates = select_candidates(pattern)
        if not candidates:
            click.echo("No files to rename")
            return

        logger.info(
            f"Found {len(candidates)} file(s), "
            f"mode: {'DRY RUN' if dry_run else 'RENAME'}"
        )

        # Wire up adapters
        service = RenamingService(
            llm=llm,
            storage=FilesystemAdapter(),
            dry_run=dry_run,
            fallback_label=settings.naming.fallback_label,
            max_slug_length=settings.naming.max_slug_length,
        )

        report(service.process_all(candidates))


if __name__ == "__main__":
    cli()
