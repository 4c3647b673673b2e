#
# config/loader.py
#
"""
Builds a NotifierConfig from defaults, environment variables and behave userdata.
"""

import os
from collections.abc import Mapping
from typing import Any

import attrs
import structlog

from behave_notifier.config.models import NotifierConfig
from behave_notifier.exceptions import ConfigurationError

log = structlog.get_logger("behave_notifier.config.loader")

# Config field -> (environment variable, behave ``-D`` userdata key)
FIELD_SOURCES: dict[str, tuple[str, str]] = {
    "notifier": ("BEHAVE_NOTIFIER", "notifier"),
    "rerun_file": ("BEHAVE_NOTIFIER_RERUN_FILE", "notifier.rerun_file"),
    "summary_title": ("BEHAVE_NOTIFIER_TITLE", "notifier.title"),
    "log_level": ("BEHAVE_NOTIFIER_LOG_LEVEL", "notifier.log_level"),
}


def load_config(
    userdata: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> NotifierConfig:
    """
    Resolves the configuration.

    Precedence: behave userdata > environment variables > defaults.

    Raises:
        ConfigurationError: if a resolved value fails validation.
    """
    userdata = userdata or {}
    environ = os.environ if environ is None else environ

    values: dict[str, Any] = {}
    for name, (env_var, userdata_key) in FIELD_SOURCES.items():
        if userdata_key in userdata and userdata[userdata_key] not in (None, ""):
            values[name] = userdata[userdata_key]
            log.debug("Config value from userdata", field=name, key=userdata_key, emoji_key="config")
        elif environ.get(env_var):
            values[name] = environ[env_var]
            log.debug("Config value from environment", field=name, env_var=env_var, emoji_key="config")

    try:
        config = NotifierConfig(**values)
    except (TypeError, ValueError) as e:
        log.error("Invalid notifier configuration", error=str(e))
        raise ConfigurationError(f"Invalid notifier configuration: {e}") from e

    log.debug("Configuration resolved", **{k: str(v) for k, v in attrs.asdict(config).items()})
    return config

# 🔔⚙️
