"""
aboutkit Data Models

File Purpose: Core data structures for release support windows and kernel configuration
Primary Functions/Classes: SupportDate, ReleaseInfo, KernelSettings, console
Inputs and Outputs (I/O): Data structure definitions, no direct I/O operations

Release constants are plain "MM/YYYY" strings; they are parsed once into
SupportDate values so a malformed constant fails at startup rather than while
the table is being rendered.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console

from .exceptions import ConfigurationError

# Shared console instance for all aboutkit modules
console = Console()

_SUPPORT_DATE_RE = re.compile(r"^(\d{1,2})/(\d{4})$")
_VERSION_RE = re.compile(r"^(\d+)\.(\d+)")


@dataclass(frozen=True)
class SupportDate:
    """The last day of a month, used as an inclusive deadline."""

    month: int
    year: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ConfigurationError(
                f"Invalid support month: {self.month}",
                details="Months must be between 1 and 12.",
            )
        if self.year < 1:
            raise ConfigurationError(
                f"Invalid support year: {self.year}",
                details="Years start at 0001.",
            )

    @classmethod
    def parse(cls, value: str) -> "SupportDate":
        """Parse a "MM/YYYY" constant."""
        match = _SUPPORT_DATE_RE.match(value.strip()) if value else None
        if not match:
            raise ConfigurationError(
                f"Malformed support date: {value!r}",
                details='Expected the "MM/YYYY" format, e.g. "07/2027".',
            )
        return cls(month=int(match.group(1)), year=int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.year}"


@dataclass
class ReleaseInfo:
    """Version constants of the framework being described."""

    version: str
    end_of_maintenance: SupportDate
    end_of_life: SupportDate
    lts_minor: int = 4

    @classmethod
    def from_constants(
        cls, version: str, end_of_maintenance: str, end_of_life: str, lts_minor: int = 4
    ) -> "ReleaseInfo":
        return cls(
            version=version,
            end_of_maintenance=SupportDate.parse(end_of_maintenance),
            end_of_life=SupportDate.parse(end_of_life),
            lts_minor=lts_minor,
        )

    def _version_parts(self):
        match = _VERSION_RE.match(self.version)
        if not match:
            raise ConfigurationError(f"Malformed version: {self.version!r}")
        return int(match.group(1)), int(match.group(2))

    @property
    def major(self) -> int:
        return self._version_parts()[0]

    @property
    def minor(self) -> int:
        return self._version_parts()[1]

    @property
    def is_lts(self) -> bool:
        return self.minor == self.lts_minor


@dataclass
class KernelSettings:
    """User-adjustable kernel configuration."""

    environment: str = "dev"
    debug: bool = True
    charset: str = "UTF-8"
    project_dir: Optional[str] = None
    cache_dir: Optional[str] = None
    log_dir: Optional[str] = None
    # Variables managed by the project's dotenv files, shown in "Environment"
    dotenv_vars: List[str] = field(default_factory=list)
