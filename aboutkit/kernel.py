"""
Application Kernel

File Purpose: The kernel object whose configuration the about command reports
Primary Functions/Classes: Kernel
Inputs and Outputs (I/O): Resolves directory paths, no file I/O
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .models import KernelSettings


class Kernel:
    """Holds the environment, debug flag, charset and directory layout.

    Subclasses may override ``cache_dir``/``log_dir`` to change the layout;
    the defaults are ``<project>/var/cache/<env>`` and ``<project>/var/log``.
    """

    def __init__(
        self,
        environment: str = "dev",
        debug: bool = True,
        project_dir: Optional[str] = None,
        charset: str = "UTF-8",
        cache_dir: Optional[str] = None,
        log_dir: Optional[str] = None,
    ):
        self.environment = environment
        self.debug = debug
        self.charset = charset
        self._project_dir = Path(project_dir or os.getcwd()).resolve()
        self._cache_dir = Path(cache_dir) if cache_dir else None
        self._log_dir = Path(log_dir) if log_dir else None

    @classmethod
    def from_settings(cls, settings: KernelSettings) -> "Kernel":
        return cls(
            environment=settings.environment,
            debug=settings.debug,
            project_dir=settings.project_dir,
            charset=settings.charset,
            cache_dir=settings.cache_dir,
            log_dir=settings.log_dir,
        )

    @property
    def project_dir(self) -> Path:
        return self._project_dir

    @property
    def cache_dir(self) -> Path:
        if self._cache_dir is not None:
            return self._cache_dir
        return self.project_dir / "var" / "cache" / self.environment

    @property
    def log_dir(self) -> Path:
        if self._log_dir is not None:
            return self._log_dir
        return self.project_dir / "var" / "log"

    @property
    def type_name(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} env={self.environment!r} debug={self.debug}>"
