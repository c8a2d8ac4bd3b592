"""Shared fixtures for pdfspool tests."""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml

from pdfspool.config import InvocationConfig, ScalingMode
from pdfspool.printing.mock import MockBackend


# === Path/Directory Fixtures ===

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


# === PDF Fixtures ===

def _write_pdf(path: Path, sizes: list[tuple[float, float]]) -> Path:
    from pypdf import PdfWriter

    writer = PdfWriter()
    for width, height in sizes:
        writer.add_blank_page(width=width, height=height)
    with open(path, "wb") as f:
        writer.write(f)
    return path


@pytest.fixture
def letter_pdf(temp_dir):
    """Single-page US Letter PDF."""
    return _write_pdf(temp_dir / "letter.pdf", [(612, 792)])


@pytest.fixture
def a4_pdf(temp_dir):
    """Single-page A4 PDF."""
    return _write_pdf(temp_dir / "a4.pdf", [(595, 842)])


@pytest.fixture
def mixed_pdf(temp_dir):
    """Two-page PDF whose first page is landscape and second portrait."""
    return _write_pdf(temp_dir / "mixed.pdf", [(792, 612), (612, 792)])


@pytest.fixture
def empty_pdf(temp_dir):
    """Structurally valid PDF with no pages."""
    return _write_pdf(temp_dir / "empty.pdf", [])


@pytest.fixture
def broken_pdf(temp_dir):
    """File with a .pdf extension that is not a PDF."""
    path = temp_dir / "broken.pdf"
    path.write_bytes(b"this is not a pdf document")
    return path


# === Config Fixtures ===

@pytest.fixture
def make_config():
    """Factory for InvocationConfig with test-friendly defaults."""

    def _make(files, **overrides):
        values = {
            "files": tuple(Path(f) for f in files),
            "printer": "HP LaserJet",
            "scaling": ScalingMode.FIT,
            "backend": "mock",
        }
        values.update(overrides)
        return InvocationConfig(**values)

    return _make


@pytest.fixture
def defaults_file(temp_dir):
    """YAML defaults file with every supported key."""
    path = temp_dir / "pdfspool.yaml"
    with open(path, "w") as f:
        yaml.dump(
            {
                "printer": "Office_LaserJet",
                "scaling": "actual",
                "papersize": "A4",
                "fast_fail": True,
                "backend": "mock",
            },
            f,
        )
    return path


# === Backend Fixtures ===

@pytest.fixture
def mock_backend():
    """MockBackend with a realistic printer list."""
    return MockBackend(printers=["HP LaserJet", "Office LaserJet 4000", "Brother_HL"])


@pytest.fixture
def mock_win32print():
    """Mock win32print module for printer tests."""
    mock = MagicMock()
    mock.PRINTER_ENUM_LOCAL = 2
    mock.PRINTER_ENUM_CONNECTIONS = 4
    mock.EnumPrinters.return_value = [
        (0, "", "Printer 1", ""),
        (0, "", "Printer 2", ""),
        (0, "", "Label Printer", ""),
    ]
    with patch.dict("sys.modules", {"win32print": mock}):
        yield mock


@pytest.fixture
def mock_subprocess_run():
    """Mock subprocess.run for lp, lpstat and SumatraPDF calls."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        yield mock_run


@pytest.fixture
def cups_on_path():
    """Pretend the CUPS client tools are installed."""
    with patch("shutil.which", side_effect=lambda tool: f"/usr/bin/{tool}"):
        yield


@pytest.fixture(autouse=True)
def reset_pdfspool_logging():
    """Drop handlers installed by setup_logging so they don't outlive captured streams."""
    import logging

    yield
    logger = logging.getLogger("pdfspool")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
