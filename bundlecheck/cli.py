"""
Command-line entrypoint for the scorecard custom tests.

Scorecard runs the image with the test name as its only argument and
the bundle unpacked at a well-known path. The result is written to
stdout as JSON; diagnostics go to stderr.
"""

import sys
from pathlib import Path
from typing import NoReturn, Tuple

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .bundle import BundleLoadError, load_bundle
from .scorecard import run_check

# Where the scorecard pod mounts the untar'd bundle.
POD_BUNDLE_ROOT = "/bundle"
BUNDLE_ROOT_ENVVAR = "SCORECARD_BUNDLE_ROOT"

err_console = Console(stderr=True)


def _fatal(message: str) -> NoReturn:
    """Report an unrecoverable error and exit without a result."""
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(1)


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="bundlecheck")
@click.argument("args", nargs=-1, metavar="[TEST_NAME] [ARGS]...")
@click.option(
    "--bundle-dir",
    "-b",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=BUNDLE_ROOT_ENVVAR,
    default=POD_BUNDLE_ROOT,
    show_default=True,
    help=f"Unpacked bundle directory (or set {BUNDLE_ROOT_ENVVAR})",
)
def cli(args: Tuple[str, ...], bundle_dir: Path):
    """
    Run one scorecard test against an operator bundle.

    TEST_NAME is one of related-images-check, annotations-check or
    install-modes-check. Any other name reports the valid names as a
    failing result. Arguments after TEST_NAME are ignored.
    """
    test_name = args[0] if args else ""
    if not test_name:
        _fatal("Test name argument is required")

    try:
        bundle = load_bundle(bundle_dir)
    except BundleLoadError as e:
        _fatal(str(e))

    status = run_check(test_name, bundle)

    try:
        output = status.to_json()
    except (TypeError, ValueError) as e:
        _fatal(f"Failed to generate json: {e}")

    click.echo(output, nl=False)


def main():
    cli()


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    main()
