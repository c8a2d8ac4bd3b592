"""Unified exception hierarchy for pdfspool.

Errors fall into two tiers:
- Fatal errors (usage, validation, config, backend, printer resolution) end the run.
- PerFileError subclasses affect a single document; the batch driver decides
  whether to continue based on the fast-fail setting.
"""

from typing import Any


class PdfSpoolError(Exception):
    """Base exception for all pdfspool errors.

    Args:
        message: Human-readable error description
        context: Optional dict of contextual information (file, printer, etc.)
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        base = super().__str__()
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base} [{details}]"
        return base


class UsageError(PdfSpoolError):
    """Raised when arguments are malformed or a required option is missing."""


class ValidationError(PdfSpoolError):
    """Raised when a scaling mode or paper size token is not recognized."""


class ConfigError(PdfSpoolError):
    """Raised when a defaults file or backend selection is invalid."""


class PrinterError(PdfSpoolError):
    """Raised when a print backend is unavailable or cannot enumerate printers."""


class PrinterResolutionError(PdfSpoolError):
    """Raised when the requested printer matches none of the installed printers."""

    def __init__(self, requested: str, available: list[str]):
        super().__init__(f"Printer not found: {requested}")
        self.requested = requested
        self.available = list(available)


class PerFileError(PdfSpoolError):
    """Raised for failures that only affect the current document."""

    def __init__(self, message: str, path, context: dict[str, Any] | None = None):
        super().__init__(message, context)
        self.path = path


class DocumentError(PerFileError):
    """Raised when a document is missing, unreadable, or has no pages."""


class PrintJobError(PerFileError):
    """Raised when a print job cannot be built or is rejected by the spooler."""
