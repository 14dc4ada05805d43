"""
aboutkit Command Line Interface

File Purpose: argparse entry point wiring settings, kernel and the about command
Primary Functions/Classes: build_parser, main
Inputs and Outputs (I/O): Command line arguments in, exit code out
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import END_OF_LIFE, END_OF_MAINTENANCE, __version__
from .about import AboutCommand
from .exceptions import ConfigurationError, handle_error
from .kernel import Kernel
from .models import ReleaseInfo, console
from .settings import (
    DEFAULT_DOTENV_FILE,
    DEFAULT_SETTINGS_FILE,
    SettingsManager,
    load_dotenv_variables,
)

logger = logging.getLogger(__name__)

ABOUT_HELP = """\
The about command displays information about the current project.

The Python section displays important configuration that could affect your
application. The values might be different between the web server and the CLI.

The Environment section displays the environment variables declared in the
project .env file (plus any listed in APP_DOTENV_VARS). It is not shown if no
variables are declared.

Passing --is-maintained makes the command fail if the current release is past
its end of maintenance (can be used in CI: `aboutkit about --is-maintained`).
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aboutkit", description="Runtime and environment diagnostics"
    )
    parser.add_argument("--version", action="version", version=f"aboutkit {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")
    about = subparsers.add_parser(
        AboutCommand.name,
        help=AboutCommand.description,
        description=ABOUT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    about.add_argument(
        "--is-maintained",
        action="store_true",
        help="Exit with an error if the current release is unmaintained (usable with CI tools)",
    )
    about.add_argument("--project-dir", default=None, help="Project root (defaults to the current directory)")
    about.add_argument(
        "--config",
        default=None,
        help=f"Settings file (defaults to <project-dir>/{DEFAULT_SETTINGS_FILE})",
    )
    return parser


def run_about(args: argparse.Namespace) -> int:
    release = ReleaseInfo.from_constants(__version__, END_OF_MAINTENANCE, END_OF_LIFE)

    base_dir = Path(args.project_dir or Path.cwd())
    settings_file = Path(args.config) if args.config else base_dir / DEFAULT_SETTINGS_FILE
    settings = SettingsManager(settings_file).settings
    if args.project_dir or settings.project_dir is None:
        settings.project_dir = str(base_dir)

    kernel = Kernel.from_settings(settings)
    logger.debug("Running about for %r", kernel)

    dotenv_names, environ = load_dotenv_variables(kernel.project_dir / DEFAULT_DOTENV_FILE)
    dotenv_vars = settings.dotenv_vars + [n for n in dotenv_names if n not in settings.dotenv_vars]

    command = AboutCommand(
        kernel, release, console=console, dotenv_vars=dotenv_vars, environ=environ
    )
    return command.execute(is_maintained=args.is_maintained)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command != AboutCommand.name:
        parser.print_help()
        return 0

    try:
        return run_about(args)
    except ConfigurationError as e:
        handle_error(console, e, "Configuration", show_details=True)
        return 2
