# src/behave_notifier/cli/rerun_cmds.py

from pathlib import Path

import click
import structlog

from behave_notifier.cli.utils import rerun_file_option
from behave_notifier.runtime import clear_rerun_file, read_rerun_file
from behave_notifier.telemetry import StructLogger

log: StructLogger = structlog.get_logger("behave_notifier.cli.rerun")


@click.group(name="rerun")
def rerun_cli():
    """Commands for inspecting the rerun file."""
    pass


@rerun_cli.command(name="show")
@rerun_file_option
def show_rerun(rerun_file: Path):
    """List the feature locations recorded for rerun."""
    if not rerun_file.exists():
        click.echo(f"No rerun file at '{rerun_file}'.")
        return
    locations = read_rerun_file(rerun_file)
    log.debug("Read rerun file", path=str(rerun_file), locations=len(locations))
    for location in locations:
        click.echo(location)


@rerun_cli.command(name="clear")
@rerun_file_option
def clear_rerun(rerun_file: Path):
    """Delete the rerun file."""
    if clear_rerun_file(rerun_file):
        click.echo(f"Removed '{rerun_file}'.")
    else:
        click.echo(f"No rerun file at '{rerun_file}'.")
