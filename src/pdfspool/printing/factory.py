"""Factory functions for printer backend selection."""

import os
import sys
from typing import TYPE_CHECKING

from pdfspool.constants import ENV_BACKEND
from pdfspool.exceptions import ConfigError

if TYPE_CHECKING:
    from pdfspool.printing.base import PrinterBackend


def get_default_backend() -> "PrinterBackend":
    """Get the appropriate printer backend for the current platform.

    Platform support:
        - Windows: SumatraBackend
        - macOS/Linux: CupsBackend
    """
    if sys.platform == "win32":
        from pdfspool.printing.sumatra import SumatraBackend
        return SumatraBackend()

    from pdfspool.printing.cups import CupsBackend
    return CupsBackend()


def get_backend(name: str | None = None) -> "PrinterBackend":
    """Get a printer backend by name.

    Args:
        name: 'auto', 'cups', 'sumatra' or 'mock'. When None, the
            PDFSPOOL_BACKEND environment variable is consulted, then 'auto'.

    Returns:
        PrinterBackend instance

    Raises:
        ConfigError: If the backend name is not recognized
    """
    if name is None:
        name = os.environ.get(ENV_BACKEND, "auto")
    name = name.strip().lower()

    backends = {
        "auto": get_default_backend,
        "cups": _get_cups,
        "sumatra": _get_sumatra,
        "mock": _get_mock,
    }

    if name not in backends:
        available = ", ".join(sorted(backends.keys()))
        raise ConfigError(f"Unknown printer backend: '{name}'. Available: {available}")

    return backends[name]()


def _get_cups() -> "PrinterBackend":
    from pdfspool.printing.cups import CupsBackend
    return CupsBackend()


def _get_sumatra() -> "PrinterBackend":
    from pdfspool.printing.sumatra import SumatraBackend
    return SumatraBackend()


def _get_mock() -> "PrinterBackend":
    from pdfspool.printing.mock import MockBackend
    return MockBackend()
