"""
aboutkit Settings Management

File Purpose: Kernel settings persistence and environment overrides
Primary Functions/Classes: SettingsManager
Inputs and Outputs (I/O): Settings file I/O, environment variable lookups

Settings come from a JSON file in the project directory; APP_ENV, APP_DEBUG,
APP_CHARSET and APP_DOTENV_VARS override what the file says. Variables
declared in the project .env file are read with python-dotenv.
"""

import json
import logging
import os
from dataclasses import asdict, fields
from collections import ChainMap
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from dotenv import dotenv_values

from .exceptions import ConfigurationError
from .models import KernelSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "aboutkit.json"
DEFAULT_DOTENV_FILE = ".env"

TRUTHY = ("1", "true", "yes", "y", "on")

# Settings that may not be null or empty
REQUIRED_STRINGS = ("environment", "charset")


def parse_bool(value: str) -> bool:
    return value.strip().lower() in TRUTHY


class SettingsManager:
    """Loads and saves kernel settings."""

    def __init__(self, settings_file: Path, environ: Optional[Mapping[str, str]] = None):
        self.settings_file = Path(settings_file)
        self.environ = os.environ if environ is None else environ
        self.settings = self._load_settings()
        self._apply_environment()

    def _load_settings(self) -> KernelSettings:
        """Load settings from file or create defaults."""
        base = KernelSettings()
        if not self.settings_file.exists():
            logger.debug("No settings file at %s, using defaults", self.settings_file)
            return base

        try:
            with open(self.settings_file, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read settings from %s: %s", self.settings_file, e)
            return base

        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: not a JSON object", self.settings_file)
            return base

        known = {f.name for f in fields(KernelSettings)}
        for k, v in data.items():
            if k in known:
                self._update_setting(base, k, v)
            else:
                logger.debug("Ignoring unknown setting %r", k)
        return base

    def _apply_environment(self):
        env = self.environ
        if env.get("APP_ENV"):
            self.settings.environment = env["APP_ENV"]
        if env.get("APP_DEBUG") is not None and env.get("APP_DEBUG") != "":
            self.settings.debug = parse_bool(env["APP_DEBUG"])
        if env.get("APP_CHARSET"):
            self.settings.charset = env["APP_CHARSET"]
        if env.get("APP_DOTENV_VARS"):
            self._update_setting(self.settings, "dotenv_vars", env["APP_DOTENV_VARS"])

    @staticmethod
    def _update_setting(settings: KernelSettings, key: str, value):
        """Update a specific setting with validation."""
        if key == "debug":
            if isinstance(value, str):
                settings.debug = parse_bool(value)
            elif isinstance(value, (bool, int)):
                settings.debug = bool(value)
            else:
                raise ConfigurationError(
                    f"Invalid debug setting: {value!r}",
                    details="Expected true/false.",
                )
        elif key == "dotenv_vars":
            if isinstance(value, str):
                value = value.split(",")
            if not isinstance(value, list):
                raise ConfigurationError(
                    "Invalid dotenv_vars setting",
                    details="Expected a list or a comma separated string.",
                )
            settings.dotenv_vars = [str(v).strip() for v in value if str(v).strip()]
        elif key in REQUIRED_STRINGS:
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(
                    f"Invalid {key} setting: {value!r}",
                    details="Expected a non-empty string.",
                )
            setattr(settings, key, value)
        elif value is None or isinstance(value, str):
            setattr(settings, key, value)
        else:
            raise ConfigurationError(
                f"Invalid {key} setting: {value!r}",
                details="Expected a path string or null.",
            )

    def save(self):
        """Save current settings to file."""
        try:
            with open(self.settings_file, "w") as f:
                json.dump(asdict(self.settings), f, indent=2)
        except OSError as e:
            logger.warning("Failed to save settings to %s: %s", self.settings_file, e)


def load_dotenv_variables(
    dotenv_file: Path, environ: Optional[Mapping[str, str]] = None
) -> Tuple[List[str], Mapping[str, str]]:
    """Names declared in a .env file and the environment they resolve in.

    Real environment variables win over values from the file, the same
    precedence as ``load_dotenv(override=False)``; the process environment is
    left untouched.
    """
    environ = os.environ if environ is None else environ
    dotenv_file = Path(dotenv_file)
    if not dotenv_file.is_file():
        logger.debug("No dotenv file at %s", dotenv_file)
        return [], environ

    values = dotenv_values(dotenv_file)
    logger.debug("Loaded %d variables from %s", len(values), dotenv_file)
    file_values = {k: v for k, v in values.items() if v is not None}
    return list(values), ChainMap(environ, file_values)
