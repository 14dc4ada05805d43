"""
About Command

File Purpose: Builds and prints the about table, and runs the maintenance check
Primary Functions/Classes: AboutCommand, SEPARATOR
Inputs and Outputs (I/O): Reads directory sizes and environment flags, prints a rich table

The table has four sections: the framework release with its support window,
the application kernel, the Python runtime, and (when the project declares
any) its dotenv-managed environment variables.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Callable, List, Mapping, Optional, Sequence, Tuple, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import expiry
from .exceptions import MaintenanceExpiredError, handle_error
from .formatting import directory_size, format_bool, format_memory, format_path
from .kernel import Kernel
from .models import ReleaseInfo, console as default_console
from .runtime import runtime_rows

logger = logging.getLogger(__name__)

RELEASES_URL = "https://pypi.org/project/aboutkit/#history"

# Marks a section boundary in the row list
SEPARATOR = object()

Row = Union[Tuple[str, ...], object]


class AboutCommand:
    """Displays information about the current project."""

    name = "about"
    description = "Displays information about the current project"

    def __init__(
        self,
        kernel: Kernel,
        release: ReleaseInfo,
        clock: Optional[Callable[[], datetime]] = None,
        console: Optional[Console] = None,
        dotenv_vars: Sequence[str] = (),
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.kernel = kernel
        self.release = release
        self.clock = clock or datetime.now
        self.console = console or default_console
        self.dotenv_vars = list(dotenv_vars)
        self.environ = os.environ if environ is None else environ

    def check_maintained(self, now: datetime) -> None:
        if expiry.is_expired(self.release.end_of_maintenance, now):
            raise MaintenanceExpiredError(
                f'Framework "{self.release.version}" is not maintained anymore, '
                f"see {RELEASES_URL} to upgrade."
            )

    def execute(self, is_maintained: bool = False, now: Optional[datetime] = None) -> int:
        now = now or self.clock()

        if is_maintained:
            try:
                self.check_maintained(now)
            except MaintenanceExpiredError as e:
                logger.info("Maintenance check failed for %s", self.release.version)
                handle_error(self.console, e, "Maintenance check")
                return 1

        self.render(self.build_rows(now))
        return 0

    def build_rows(self, now: Optional[datetime] = None) -> List[Row]:
        now = now or self.clock()
        release = self.release
        kernel = self.kernel

        rows: List[Row] = [
            ("[green]Framework[/]",),
            SEPARATOR,
            ("Version", escape(release.version)),
            ("Long-Term Support", "Yes" if release.is_lts else "No"),
            ("End of maintenance", expiry.describe(release.end_of_maintenance, now)),
            ("End of life", expiry.describe(release.end_of_life, now)),
            SEPARATOR,
            ("[green]Kernel[/]",),
            SEPARATOR,
            ("Type", escape(kernel.type_name)),
            ("Environment", escape(kernel.environment)),
            ("Debug", format_bool(kernel.debug)),
            ("Charset", escape(kernel.charset)),
            ("Cache directory", self._directory_label(kernel.cache_dir)),
            ("Log directory", self._directory_label(kernel.log_dir)),
            SEPARATOR,
            ("[green]Python[/]",),
            SEPARATOR,
        ]
        rows.extend(runtime_rows(now))

        if self.dotenv_vars:
            rows.extend([SEPARATOR, ("[green]Environment (.env)[/]",), SEPARATOR])
            for name in self.dotenv_vars:
                rows.append((escape(name), escape(self.environ.get(name, "n/a"))))

        return rows

    def _directory_label(self, path) -> str:
        size = format_memory(directory_size(path))
        return f"{escape(format_path(path, self.kernel.project_dir))} ([yellow]{size}[/])"

    def render(self, rows: List[Row]) -> None:
        table = Table(show_header=False)
        table.add_column("Name", style="bold")
        table.add_column("Value")

        for row in rows:
            if row is SEPARATOR:
                table.add_section()
            else:
                table.add_row(*row)

        self.console.print(table)
