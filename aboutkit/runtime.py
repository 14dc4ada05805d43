"""
Python Runtime Introspection

File Purpose: Collects interpreter facts shown in the "Python" section of the about table
Primary Functions/Classes: runtime_rows, current_locale, timezone_label, debugger_active
Inputs and Outputs (I/O): Reads interpreter flags and locale settings, no file I/O

Every probe degrades to a display default ("n/a" or "false") instead of raising.
"""

import locale
import logging
import platform
import struct
import sys
from datetime import datetime
from typing import List, Optional, Tuple

from rich.markup import escape

from .formatting import format_bool

logger = logging.getLogger(__name__)

# Modules whose presence means a debugger is attached or about to be
DEBUGGER_MODULES = ("pydevd", "debugpy", "ipdb")


def python_version() -> str:
    return platform.python_version()


def architecture() -> str:
    return f"{struct.calcsize('P') * 8} bits"


def current_locale() -> str:
    try:
        name = locale.getlocale()[0]
    except (ValueError, TypeError) as e:
        logger.debug("Locale lookup failed: %s", e)
        return "n/a"
    return name or "n/a"


def timezone_label(now: Optional[datetime] = None) -> str:
    """Local timezone name followed by the current W3C timestamp."""
    local_now = (now or datetime.now()).astimezone()
    name = local_now.tzname() or "n/a"
    return f"{name} ([yellow]{local_now.isoformat(timespec='seconds')}[/])"


def bytecode_cache_enabled() -> bool:
    return not sys.dont_write_bytecode


def optimizations_enabled() -> bool:
    return sys.flags.optimize > 0


def debugger_active() -> bool:
    if sys.gettrace() is not None:
        return True
    return any(name in sys.modules for name in DEBUGGER_MODULES)


def runtime_rows(now: Optional[datetime] = None) -> List[Tuple[str, str]]:
    return [
        ("Version", python_version()),
        ("Implementation", escape(platform.python_implementation() or "n/a")),
        ("Architecture", architecture()),
        ("Locale", escape(current_locale())),
        ("Timezone", timezone_label(now)),
        ("Bytecode cache", format_bool(bytecode_cache_enabled())),
        ("Optimizations", format_bool(optimizations_enabled())),
        ("Debugger", format_bool(debugger_active())),
    ]
