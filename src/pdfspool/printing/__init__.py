"""Printing package with backend abstraction for the OS print spooler."""

from pdfspool.printing.base import PrinterBackend, PrintJob
from pdfspool.printing.cups import CupsBackend
from pdfspool.printing.sumatra import SumatraBackend
from pdfspool.printing.mock import MockBackend
from pdfspool.printing.factory import get_default_backend, get_backend

__all__ = [
    "PrinterBackend",
    "PrintJob",
    "CupsBackend",
    "SumatraBackend",
    "MockBackend",
    "get_default_backend",
    "get_backend",
]
