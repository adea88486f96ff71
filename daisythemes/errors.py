"""Error codes and error handling utilities for daisythemes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme extraction."""

    # Stylesheet errors
    CSS_FILE_NOT_FOUND = auto()
    CSS_READ_FAILED = auto()

    # Theme resolution errors
    THEME_NOT_FOUND = auto()
    THEME_MODULE_LOAD_FAILED = auto()
    NODE_UNAVAILABLE = auto()

    # Output errors
    OUTPUT_WRITE_FAILED = auto()

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_MISSING = auto()

    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.CSS_FILE_NOT_FOUND: "The CSS file was not found. Check --css-path.",
    ErrorCode.CSS_READ_FAILED: "The CSS file could not be read as UTF-8 text.",
    ErrorCode.THEME_NOT_FOUND: "The theme is not defined inline and no installed daisyUI theme matches it.",
    ErrorCode.THEME_MODULE_LOAD_FAILED: "The theme module could not be loaded.",
    ErrorCode.NODE_UNAVAILABLE: "Node.js was not found. Install it or set 'node' in the config file.",
    ErrorCode.OUTPUT_WRITE_FAILED: "The output file could not be written. Check folder permissions.",
    ErrorCode.CONFIG_INVALID: "The configuration file is invalid.",
    ErrorCode.CONFIG_MISSING: "The configuration file was not found.",
    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class DaisyThemesError(Exception):
    """Base exception for daisythemes with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)


def error_message(exc: BaseException) -> str:
    """Return the short message for *exc*, without details."""
    if isinstance(exc, DaisyThemesError):
        return exc.message
    return str(exc) or type(exc).__name__


def classify_exception(exc: Exception, path: Path | None = None) -> DaisyThemesError:
    """Classify a generic exception into a DaisyThemesError with appropriate code."""
    if isinstance(exc, DaisyThemesError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, UnicodeDecodeError):
        return DaisyThemesError(ErrorCode.CSS_READ_FAILED, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError) or "permission denied" in exc_str:
        return DaisyThemesError(
            ErrorCode.OPERATION_FAILED,
            message=f"{exc_name}: {exc}",
            path=path,
            suggestion="Check file and folder permissions.",
            details={"original": exc_str},
        )

    return DaisyThemesError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: DaisyThemesError | Exception) -> str:
    """Format an error for display with an actionable suggestion."""
    if isinstance(error, DaisyThemesError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n{error.suggestion}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
