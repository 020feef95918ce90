"""Project listing and the confirmation gate before cleaning."""

from __future__ import annotations

import click

from flutter_cleaner.models.project import Project
from flutter_cleaner.utils import bytes_to_human


def total_size(projects: list[Project]) -> int:
    return sum(p.build_size for p in projects)


def print_projects(projects: list[Project]) -> None:
    """Show each project with its reclaimable size, then the total."""
    for project in projects:
        click.echo(
            f"  {click.style('✓', fg='green')} {str(project.path):50s} — "
            f"{click.style(bytes_to_human(project.build_size), fg='green', bold=True)}"
        )
    click.echo(f"\nTotal reclaimable: {click.style(bytes_to_human(total_size(projects)), fg='green', bold=True)}\n")


def confirm_clean(projects: list[Project], dry_run: bool, no_confirm: bool) -> str:
    """Decide whether cleaning should go ahead.

    Returns one of ``"empty"``, ``"dry_run"``, ``"confirmed"`` or
    ``"declined"``. Only ``"confirmed"`` allows the cleaner to run.
    """
    if not projects:
        click.echo("No Flutter projects with build artifacts found.")
        return "empty"

    if dry_run:
        click.echo("(dry run — no changes were made)")
        return "dry_run"

    if no_confirm:
        return "confirmed"

    try:
        choice = click.prompt(
            f"Run flutter clean in {len(projects)} project(s)? [y/N]",
            default="",
            show_default=False,
        )
    except click.Abort:
        choice = ""
    match choice.strip().lower():
        case "y" | "yes":
            return "confirmed"
        case _:
            click.echo("Aborted.")
            return "declined"
