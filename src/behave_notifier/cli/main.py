# src/behave_notifier/cli/main.py

"""
Command line companion to the behave notification formatter.

The formatter runs inside behave; this CLI covers what happens around a run:
checking that a desktop notification backend works, looking at or clearing
the rerun file the last run left behind, and showing the configuration the
formatter would resolve.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from behave_notifier.cli.config_cmds import config_cli
from behave_notifier.cli.notify_cmds import notify_cli
from behave_notifier.cli.rerun_cmds import rerun_cli
from behave_notifier.cli.utils import logging_options, setup_logging_from_context
from behave_notifier.telemetry import StructLogger

try:
    __version__ = version("behave-notifier")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("behave_notifier.cli.main")

EPILOG = """\b
Typical loop:
  behave -f behave_notifier.formatter:NotificationFormatter -f pretty
  behave-notifier rerun show
  behave @rerun.txt
"""


@click.group(context_settings={"help_option_names": ["-h", "--help"]}, epilog=EPILOG)
@click.version_option(__version__, "-V", "--version", package_name="behave-notifier")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    behave-notifier: desktop notifications and rerun files for behave.

    Failing, pending and undefined steps pop up a notification as they
    happen; a summary follows at the end of the run and the failed scenarios
    are written to rerun.txt. Backend, rerun file and summary title are set
    with behave -D options (notifier, notifier.rerun_file, notifier.title) or
    BEHAVE_NOTIFIER* environment variables.
    """
    ctx.ensure_object(dict)
    ctx.obj.update(
        LOG_LEVEL=log_level,
        LOG_FILE=log_file,
        JSON_LOGS=bool(json_logs),
    )

    setup_logging_from_context(ctx, default_log_level="WARNING")
    log.debug("CLI started", command=ctx.invoked_subcommand, log_level=log_level or "WARNING")


cli.add_command(config_cli)
cli.add_command(notify_cli)
cli.add_command(rerun_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
