# src/behave_notifier/cli/notify_cmds.py

import click
import structlog

from behave_notifier.exceptions import ConfigurationError, NotificationSinkError
from behave_notifier.notifications import get_notifier
from behave_notifier.state import Icon
from behave_notifier.telemetry import StructLogger

log: StructLogger = structlog.get_logger("behave_notifier.cli.notify")


@click.command(name="notify")
@click.argument("message")
@click.option("-t", "--title", default="behave-notifier", show_default=True, help="Notification title.")
@click.option(
    "-i",
    "--image",
    type=click.Choice([icon.value for icon in Icon]),
    default=Icon.SUCCESS.value,
    show_default=True,
    help="Notification icon.",
)
@click.option(
    "-n",
    "--notifier",
    default="auto",
    show_default=True,
    envvar="BEHAVE_NOTIFIER",
    show_envvar=True,
    help="Notification backend (auto, notify-send, osascript, log, null).",
)
@click.pass_context
def notify_cli(ctx: click.Context, message: str, title: str, image: str, notifier: str):
    """Send a single notification, to check that a backend works."""
    log.info("Executing 'notify' command", notifier=notifier, title=title)
    try:
        sink = get_notifier(notifier)
        sink.notify(message, title=title, image=Icon(image))
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(2)
    except NotificationSinkError as e:
        log.error("Notification failed", error=str(e))
        click.echo(f"Error: Notification failed: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Notification sent via {type(sink).__name__}.")
