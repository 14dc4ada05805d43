"""Display helpers for paths, sizes and flags."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

KIB = 1024
MIB = 1024 * KIB
GIB = 1024 * MIB


def format_path(path: PathLike, base_dir: PathLike) -> str:
    """Show ``path`` relative to ``base_dir`` as ``./...`` when it lives under it."""
    path = str(path)
    base_dir = str(base_dir).rstrip(os.sep)
    if base_dir and (path == base_dir or path.startswith(base_dir + os.sep)):
        return "." + path[len(base_dir):]
    return path


def directory_size(path: PathLike) -> int:
    """Size in bytes of a file, or of everything below a directory.

    Symlinks are followed. Missing or unreadable entries count as zero.
    """
    path = Path(path)
    if path.is_file():
        try:
            return path.stat().st_size
        except OSError as e:
            logger.debug("Could not stat %s: %s", path, e)
            return 0
    if not path.is_dir():
        logger.debug("No such directory: %s", path)
        return 0

    total = 0
    for root, _dirs, files in os.walk(path, followlinks=True):
        for name in files:
            try:
                total += os.stat(os.path.join(root, name)).st_size
            except OSError as e:
                logger.debug("Skipping %s: %s", name, e)
    return total


def format_memory(size: int) -> str:
    if size >= GIB:
        return f"{size / GIB:.1f} GiB"
    if size >= MIB:
        return f"{size / MIB:.1f} MiB"
    if size >= KIB:
        return f"{size // KIB} KiB"
    return f"{size} B"


def format_bool(value) -> str:
    return "true" if value else "false"
