"""Output formatting for symfarm operations."""

import typer

from symfarm.exceptions import PackageFailuresError
from symfarm.models import PackageReport


def print_install_report(report: PackageReport) -> None:
    """Print what an install did to stdout."""
    _print_skipped(report)

    parts = [_count(len(report.links_created), "symlink") + " created"]
    if report.directories_created:
        parts.append(_count(len(report.directories_created), "directory") + " created")
    if report.links_present:
        parts.append(f"{len(report.links_present)} already correct")
    if report.skipped:
        parts.append(f"{len(report.skipped)} skipped")

    typer.secho(
        f"✓ Installed {report.package} ({', '.join(parts)})",
        fg=typer.colors.GREEN,
        bold=True,
    )


def print_uninstall_report(report: PackageReport) -> None:
    """Print what an uninstall did to stdout."""
    _print_skipped(report)

    parts = [_count(len(report.links_removed), "symlink") + " removed"]
    if report.directories_removed:
        parts.append(_count(len(report.directories_removed), "directory") + " removed")
    if report.links_missing:
        parts.append(f"{len(report.links_missing)} missing")
    if report.directories_kept:
        parts.append(f"{len(report.directories_kept)} non-empty kept")
    if report.skipped:
        parts.append(f"{len(report.skipped)} skipped (modified)")

    typer.secho(
        f"✓ Uninstalled {report.package} ({', '.join(parts)})",
        fg=typer.colors.GREEN,
        bold=True,
    )


def print_failures(error: PackageFailuresError, action: str) -> None:
    """Print every failed package, and any failed rollback, to stderr."""
    for failure in error.failures:
        typer.secho(
            f"✗ Failed to {action} {failure.package}: {failure.error}",
            fg=typer.colors.RED,
            bold=True,
            err=True,
        )
        if failure.rollback_error is not None:
            typer.secho(
                f"   Rollback also failed: {failure.rollback_error}",
                err=True,
            )
            typer.secho(
                "   Warning: Package may be partially installed. Check the "
                "target directory manually.",
                err=True,
            )


def _print_skipped(report: PackageReport) -> None:
    if report.skipped:
        typer.secho("Skipped:", fg=typer.colors.BRIGHT_BLACK)
        for skip in report.skipped:
            typer.secho(
                f"  {skip.path} ({skip.reason.value})", fg=typer.colors.BRIGHT_BLACK
            )


def _count(n: int, noun: str) -> str:
    if n == 1:
        return f"1 {noun}"
    plural = noun[:-1] + "ies" if noun.endswith("y") else noun + "s"
    return f"{n} {plural}"
