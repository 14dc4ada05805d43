"""
aboutkit Exceptions and Error Utilities

File Purpose: Centralized exception types and simple error handling helpers
Primary Classes/Functions: AboutkitError, ConfigurationError, MaintenanceExpiredError, handle_error
Inputs and Outputs (I/O): Accepts exceptions and console; prints user-friendly messages
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape


class AboutkitError(Exception):
    """Base exception for all aboutkit-specific errors."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.details = details
        self.original_error = original_error
        super().__init__(message)


class ConfigurationError(AboutkitError):
    """Raised when release constants or settings are malformed."""

    pass


class MaintenanceExpiredError(AboutkitError):
    """Raised when the running release is past its end of maintenance."""

    pass


def handle_error(
    console: Console,
    error: Exception,
    operation: str,
    show_details: bool = False,
    reraise: bool = False,
) -> None:
    """
    Standardized error handling function.

    Args:
        console: Rich console for output
        error: The exception that occurred
        operation: Description of the operation that failed
        show_details: Whether to show detailed error information
        reraise: Whether to re-raise the exception after handling
    """
    if isinstance(error, AboutkitError):
        console.print(f"[red]{operation} failed: {escape(error.message)}[/]")
        if show_details and error.details:
            console.print(f"[dim]   Details: {escape(error.details)}[/]")
        if show_details and error.original_error:
            console.print(f"[dim]   Original error: {escape(str(error.original_error))}[/]")
    else:
        console.print(f"[red]{operation} failed: {escape(str(error))}[/]")
        if show_details:
            console.print(f"[dim]   Error type: {type(error).__name__}[/]")

    if reraise:
        raise error
