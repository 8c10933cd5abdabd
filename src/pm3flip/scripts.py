# filename : scripts.py
# created  : 10/19/2026


import logging
import os
from importlib.metadata import PackageNotFoundError, version

import click

from pm3flip.core import Pm3FlipError
from pm3flip.core.logging import TRACE

lg = logging.getLogger(__name__)


class ConversionError(click.ClickException):
    """Reports a failed conversion as ``error: ...`` with exit status 1."""

    def show(self, file=None) -> None:
        click.echo(f"error: {self.format_message()}", file=file, err=True)


def _version_message() -> str:
    try:
        ver = version("pm3flip")
    except PackageNotFoundError:
        ver = "undefined"
    build_time = os.environ.get("PM3FLIP_BUILD_TIME", "undefined")
    git_hash = os.environ.get("PM3FLIP_GIT_HASH", "undefined")
    return f"Version: {ver}\tBuildTime: {build_time}\tGitHash: {git_hash}"


def _print_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(_version_message())
    ctx.exit()


@click.command()
@click.option(
    "-i",
    "--input",
    "input_file",
    required=True,
    help="Input Proxmark3 dump file in JSON format.",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    required=True,
    help="Output Flipper file in NFC format.",
)
@click.option("-v", "--verbose", is_flag=True, help="TRACE level (show every block).")
@click.option(
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help="Show version and build information and exit.",
)
def pm3flip(input_file, output_file, verbose):
    """Convert a Proxmark3 Mifare Classic JSON dump to a Flipper Zero NFC file."""

    logging.basicConfig(
        level=TRACE if verbose else logging.INFO,
        format="%(levelname)-8s %(name)s: %(message)s",
    )

    from pm3flip.app.main import main

    try:
        main(input_file, output_file)
    except Pm3FlipError as exc:
        raise ConversionError(str(exc)) from exc
