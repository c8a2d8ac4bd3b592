"""Windows printer backend using SumatraPDF and win32print."""

import os
import shutil
import subprocess
import sys
from pathlib import Path

from pdfspool.config import ScalingMode
from pdfspool.constants import ENV_SUMATRA_PATH
from pdfspool.exceptions import PrinterError, PrintJobError
from pdfspool.logging_config import get_logger
from pdfspool.papersize import PAPER_SIZES
from pdfspool.printing.base import PrinterBackend, PrintJob

logger = get_logger(__name__)

# Paper names understood by SumatraPDF's -print-settings "paper=" option
SUMATRA_PAPER_NAMES = {
    "a2": "A2",
    "a3": "A3",
    "a4": "A4",
    "a5": "A5",
    "a6": "A6",
    "letter": "letter",
    "legal": "legal",
    "tabloid": "tabloid",
    "statement": "statement",
}


def find_sumatra_pdf() -> Path | None:
    """
    Find SumatraPDF executable.

    Search order:
    1. PDFSPOOL_SUMATRA_PATH environment variable
    2. Current directory
    3. PATH

    Returns:
        Path to SumatraPDF.exe or None if not found
    """
    env_path = os.environ.get(ENV_SUMATRA_PATH)
    if env_path:
        path = Path(env_path)
        if path.exists():
            return path
        logger.warning("%s points to a missing file: %s", ENV_SUMATRA_PATH, env_path)

    cwd_path = Path.cwd() / "SumatraPDF.exe"
    if cwd_path.exists():
        return cwd_path

    found = shutil.which("SumatraPDF.exe") or shutil.which("SumatraPDF")
    return Path(found) if found else None


def paper_name_for(job: PrintJob) -> str | None:
    """Return the SumatraPDF paper name matching the job's size, if any."""
    for token, name in SUMATRA_PAPER_NAMES.items():
        if PAPER_SIZES[token] == job.paper_size:
            return name
    return None


class SumatraBackend(PrinterBackend):
    """Print silently on Windows through SumatraPDF's command line."""

    name = "sumatra"

    def __init__(self, sumatra_path: Path | None = None):
        self._sumatra_path = sumatra_path

    @classmethod
    def is_available(cls) -> bool:
        return sys.platform == "win32"

    @property
    def sumatra_path(self) -> Path:
        if self._sumatra_path is None:
            self._sumatra_path = find_sumatra_pdf()
        if self._sumatra_path is None:
            raise PrinterError(
                "SumatraPDF.exe not found. Put it on PATH or set the "
                f"{ENV_SUMATRA_PATH} environment variable."
            )
        return self._sumatra_path

    def list_printers(self) -> list[str]:
        try:
            import win32print
        except ImportError:
            raise PrinterError("win32print not available. Install pywin32 on Windows.") from None

        printers = win32print.EnumPrinters(
            win32print.PRINTER_ENUM_LOCAL | win32print.PRINTER_ENUM_CONNECTIONS
        )
        return [printer[2] for printer in printers]

    def build_command(self, job: PrintJob, sumatra_path: Path) -> list[str]:
        """Build the SumatraPDF command line for a job."""
        settings = ["duplexlong", "fit" if job.scaling is ScalingMode.FIT else "noscale"]
        paper = paper_name_for(job)
        if paper:
            settings.append(f"paper={paper}")
        else:
            logger.debug(
                "SumatraPDF has no named paper for %s; using the driver default", job.paper_size
            )

        return [
            str(sumatra_path),
            "-silent",
            "-print-to", job.printer,
            "-print-settings", ",".join(settings),
            str(job.pdf_path),
        ]

    def submit(self, job: PrintJob, dry_run: bool = False) -> bool:
        if dry_run:
            sumatra_path = self._sumatra_path or find_sumatra_pdf() or Path("SumatraPDF.exe")
        else:
            sumatra_path = self.sumatra_path
        cmd = self.build_command(job, sumatra_path)

        if dry_run:
            logger.info("[dry-run] Would execute: %s", " ".join(cmd))
            return True

        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            raise PrintJobError(
                f"Print failed for {job.pdf_path}: {(e.stderr or '').strip() or 'SumatraPDF error'}",
                job.pdf_path,
                context={"rc": e.returncode},
            ) from e
        except FileNotFoundError:
            raise PrinterError(f"SumatraPDF not found at: {sumatra_path}") from None
        return True
