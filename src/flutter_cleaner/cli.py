"""CLI interface for flutter-cleaner."""

from __future__ import annotations

import logging
import os
import sys
import time
from pathlib import Path

import click

from flutter_cleaner import __version__
from flutter_cleaner.core.cleaner import clean_projects
from flutter_cleaner.core.scanner import FlutterCleanerError, scan_projects
from flutter_cleaner.models.clean_result import CleanResult, ProjectOutcome
from flutter_cleaner.report import confirm_clean, print_projects
from flutter_cleaner.settings import Settings
from flutter_cleaner.utils import bytes_to_human, format_elapsed

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _print_summary(result: CleanResult, elapsed: float) -> None:
    click.echo("\nSummary")
    click.echo("-------")
    click.echo(f"  Flutter projects found:  {result.projects_found}")
    click.echo(f"  Projects cleaned:        {result.projects_cleaned}")
    click.echo(f"  Approximate space freed: {click.style(bytes_to_human(result.space_freed), fg='green', bold=True)}")
    click.echo(f"  Time taken:              {format_elapsed(elapsed)}\n")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--dir", "-d", "root",
    type=click.Path(file_okay=False, path_type=Path),
    default=lambda: os.getcwd(),
    show_default="current directory",
    help="The root directory to scan for Flutter projects",
)
@click.option("--recursive/--no-recursive", "-r", default=True, help="Scan subdirectories recursively")
@click.option("-v", "--verbose", count=True, help="Show detailed output (-v details, -vv debug)")
@click.option("--dry-run", is_flag=True, help="Only list projects and reclaimable space, clean nothing")
@click.option("--yes", "-y", "--no-confirm", "no_confirm", is_flag=True, help="Skip confirmation")
@click.version_option(__version__, prog_name="flutter-cleaner")
def main(root: Path, recursive: bool, verbose: int, dry_run: bool, no_confirm: bool) -> None:
    """Scan directories for Flutter projects and run "flutter clean" to free up disk space."""
    _setup_logging(verbose)
    detailed = verbose > 0
    ecosystem = Settings.instance().ecosystem()

    click.echo(click.style("Flutter Projects Cleaner 🧹", bold=True))
    click.echo("===========================")
    click.echo(f"🗂️  Scanning directory: {root}")
    click.echo(f"Recursive scan: {'Yes' if recursive else 'No'}\n")

    def on_scan_progress(path: Path, status: str) -> None:
        if status == "found":
            click.echo(f"  Found Flutter project at: {path}")
        elif status == "skipped":
            click.echo(f"  {click.style('🚫', fg='bright_black')} Skipped: {path} (no build directory or empty)")

    start = time.monotonic()
    try:
        projects = scan_projects(
            root,
            recursive=recursive,
            verbose=detailed,
            ecosystem=ecosystem,
            on_progress=on_scan_progress,
        )
    except (FlutterCleanerError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except Exception as exc:
        log.exception("Scan failed")
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    scan_elapsed = time.monotonic() - start

    if detailed and projects:
        click.echo()
    if projects:
        print_projects(projects)

    if confirm_clean(projects, dry_run=dry_run, no_confirm=no_confirm) != "confirmed":
        return

    click.echo(f"\n{click.style('🧹', bold=True)} Cleaning...\n")
    # Time spent at the prompt is not counted.
    clean_start = time.monotonic()

    def on_clean_progress(path: Path, status: str) -> None:
        if detailed:
            click.echo(f"  Running {' '.join(ecosystem.clean_command)} in {path}")

    def on_result(outcome: ProjectOutcome) -> None:
        path = outcome.project.path
        if outcome.success:
            click.echo(f"  ✅ Cleaned: {path} (freed {bytes_to_human(outcome.project.build_size)})")
            return
        click.echo(f"  ❌ Failed to clean: {path}")
        if detailed and outcome.error:
            click.echo(f"    Error: {outcome.error}")

    result = clean_projects(
        projects,
        ecosystem=ecosystem,
        on_progress=on_clean_progress,
        on_result=on_result,
    )
    _print_summary(result, scan_elapsed + time.monotonic() - clean_start)
