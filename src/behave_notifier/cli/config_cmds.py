# src/behave_notifier/cli/config_cmds.py

import click
import structlog
from rich.pretty import pretty_repr

from behave_notifier.config import load_config
from behave_notifier.exceptions import ConfigurationError
from behave_notifier.telemetry import StructLogger

log: StructLogger = structlog.get_logger("behave_notifier.cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting the resolved configuration."""
    pass


@config_cli.command(name="show")
@click.option(
    "-D",
    "--define",
    "defines",
    multiple=True,
    metavar="NAME=VALUE",
    help="Userdata value, as passed to behave with -D (repeatable).",
)
@click.pass_context
def show_config(ctx: click.Context, defines: tuple[str, ...]):
    """Resolve and display the configuration the formatter would use."""
    userdata = {}
    for define in defines:
        name, _, value = define.partition("=")
        userdata[name.strip()] = value.strip()
    log.info("Executing 'config show' command", userdata_keys=sorted(userdata))

    try:
        config = load_config(userdata)
    except ConfigurationError as e:
        log.error("Failed to resolve configuration", error=str(e))
        click.echo(f"Error: Configuration problem:\n{e}", err=True)
        ctx.exit(1)

    click.echo(pretty_repr(config, expand_all=True))
