"""Command-line interface for symfarm."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from symfarm import __version__
from symfarm.config import Config
from symfarm.exceptions import PackageFailuresError
from symfarm.exceptions import SymfarmError
from symfarm.models import PackageReport
from symfarm.operations import PackageManager
from symfarm.output import print_failures
from symfarm.output import print_install_report
from symfarm.output import print_uninstall_report

app = typer.Typer(help="Symlink-farm package installer", no_args_is_help=True)

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"symfarm {__version__}")
        raise typer.Exit()


def configure_logging(level: str, log: Path | None) -> None:
    """Send loguru output to stderr or the given file at the given level."""
    logger.remove()
    logger.add(sys.stderr if log is None else log, level=level, format=LOG_FORMAT)


def split_paths(paths: list[Path], default_target: Path) -> tuple[list[Path], Path]:
    """Split positional paths into packages and a target directory.

    The last of two or more paths is the target. A single path is a package
    installed into default_target; no paths means the current directory.
    """
    if len(paths) >= 2:
        return paths[:-1], paths[-1]
    if len(paths) == 1:
        return paths, default_target
    return [Path(".")], default_target


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each package step")
    ] = False,
    debug: Annotated[
        bool, typer.Option("--debug", help="Log every link and directory")
    ] = False,
    log: Annotated[
        Path | None,
        typer.Option(help="Where to write the log (default: stderr)", dir_okay=False),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(help="Config file (default: user config directory)"),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Symlink-farm package installer."""
    try:
        settings = Config.load(config)
    except SymfarmError as e:
        typer.secho(f"✗ Config error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    level = settings.log_level
    if verbose:
        level = "INFO"
    if debug:
        level = "DEBUG"
    configure_logging(level, log)
    ctx.obj = settings


def _run(
    settings: Config,
    paths: list[Path] | None,
    action: str,
    print_report: Callable[[PackageReport], None],
) -> None:
    packages, target = split_paths(paths or [], settings.target_dir)
    logger.info(f"{action} {len(packages)} package(s) into {target}")

    try:
        manager = PackageManager(
            target,
            files_dirname=settings.files_dirname,
            info_filename=settings.info_filename,
        )
        reports = getattr(manager, action)(packages)
    except PackageFailuresError as e:
        for report in e.reports:
            print_report(report)
        print_failures(e, action)
        raise typer.Exit(1) from None
    except SymfarmError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    for report in reports:
        print_report(report)


@app.command()
def install(
    ctx: typer.Context,
    paths: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Package directories followed by the target directory "
            "(default: current directory into /)"
        ),
    ] = None,
) -> None:
    """Install packages by linking their pkgfiles tree into the target."""
    _run(ctx.obj, paths, "install", print_install_report)


@app.command()
def uninstall(
    ctx: typer.Context,
    paths: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Package directories followed by the target directory "
            "(default: current directory from /)"
        ),
    ] = None,
) -> None:
    """Uninstall packages, removing only links that still match."""
    _run(ctx.obj, paths, "uninstall", print_uninstall_report)


def main() -> None:
    """Main entry point for the symfarm CLI."""
    app()


if __name__ == "__main__":
    main()
