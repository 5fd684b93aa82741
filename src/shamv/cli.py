"""Command line interface for shamv."""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console

from shamv.config import ConfigManager
from shamv.digest import DigestEngine, HashComputer, resolve_algorithm
from shamv.errors import ExitCode, InsufficientArgumentsError, ShamvError, display_path
from shamv.log import configure_logging
from shamv.renaming import RenameExecutor, RenamePlanner, RenameReport

PROG_NAME = "shamv"

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def _print_error(message: str) -> None:
    err_console.print(f"{PROG_NAME}: {message}", markup=False)


def _handle_cli_error(exc: ShamvError, ctx: click.Context | None = None) -> NoReturn:
    """Report a fatal error on stderr and exit with its status code.

    Args:
        exc: Error that halted the run.
        ctx: Click context; when given for a usage error, the usage line is echoed.

    Raises:
        SystemExit: Always, carrying the error's exit code.
    """

    _print_error(str(exc))
    if ctx is not None and isinstance(exc, InsufficientArgumentsError):
        err_console.print(ctx.get_usage(), markup=False)
    raise SystemExit(int(exc.exit_code))


def _emit_report(report: RenameReport) -> None:
    for operation in report.previewed:
        source = display_path(operation.source)
        destination = display_path(operation.destination)
        console.print(f"{source} → {destination}", markup=False)
    for failure in report.failures:
        _print_error(failure.message)


@click.command(
    name=PROG_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("files", nargs=-1, metavar="FILE...", type=click.Path(path_type=Path))
@click.option(
    "-a",
    "--algorithm",
    metavar="NAME",
    help="The SHA-2 algorithm to use: sha224, sha256 (default), sha384, or sha512.",
)
@click.option(
    "-n",
    "--dry-run",
    is_flag=True,
    help="Display the current and new filenames but do not perform the rename.",
)
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Replace an existing file at the destination instead of failing.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each hashing and rename step.")
@click.version_option(
    None,
    "-V",
    "--version",
    package_name="shamv",
    prog_name=PROG_NAME,
    message="%(prog)s version %(version)s",
    help="Print the version of the program and exit.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[Path, ...],
    algorithm: str | None,
    dry_run: bool,
    force: bool,
    verbose: bool,
) -> None:
    """Rename each FILE to a name formed from the SHA-2 hash of its content.

    If FILE has a filename extension, the new name is the hash followed by
    that extension (the last dot-separated suffix); otherwise it is the hash
    alone. Files stay in their original directory.

    \b
    Exit status:
      0  success
      1  no FILE operand given
      2  unsupported algorithm
      3  file not found
      4  a file could not be read
      5  one or more renames failed
      6  invalid SHAMV__* configuration
      7  unexpected internal error
    """

    try:
        overrides: dict[str, Any] = {}
        if force:
            overrides["rename.on_conflict"] = "overwrite"
        if verbose:
            overrides["logging.level"] = "DEBUG"
        config = ConfigManager().load(cli_overrides=overrides)
        configure_logging(config.logging.level)

        selected = resolve_algorithm(algorithm or config.digest.algorithm)

        if not files:
            raise InsufficientArgumentsError("must specify at least one file")

        planner = RenamePlanner(HashComputer(DigestEngine(selected)))
        plan = planner.build_plan(files)
        report = RenameExecutor(on_conflict=config.rename.on_conflict).apply(plan, dry_run=dry_run)
    except ShamvError as exc:
        _handle_cli_error(exc, ctx)

    _emit_report(report)
    if report.has_failures:
        raise SystemExit(int(ExitCode.RENAME_ERROR))


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
