"""CUPS printer backend (macOS and Linux) using ``lp`` and ``lpstat``."""

import shutil
import subprocess
import sys

from pdfspool.config import ScalingMode
from pdfspool.constants import DUPLEX_LONG_EDGE, JOB_HOLD_NONE
from pdfspool.exceptions import PrinterError, PrintJobError
from pdfspool.logging_config import get_logger
from pdfspool.printing.base import PrinterBackend, PrintJob

logger = get_logger(__name__)


class CupsBackend(PrinterBackend):
    """Print through the CUPS command-line clients.

    Custom media is passed in points (``Custom.WxH``), so any table size or a
    document's own page size can be requested without a named PPD entry.
    """

    name = "cups"

    def __init__(self, lp_path: str = "lp", lpstat_path: str = "lpstat"):
        self._lp_path = lp_path
        self._lpstat_path = lpstat_path

    @classmethod
    def is_available(cls) -> bool:
        return sys.platform != "win32" and shutil.which("lp") is not None

    def _require(self, tool: str) -> None:
        if shutil.which(tool) is None:
            raise PrinterError(f"CUPS not available: '{tool}' not found in PATH")

    def list_printers(self) -> list[str]:
        self._require(self._lpstat_path)
        proc = subprocess.run(
            [self._lpstat_path, "-e"],
            capture_output=True,
            text=True,
        )
        if proc.returncode != 0:
            out = (proc.stderr or proc.stdout or "").strip()
            # lpstat exits non-zero when no destinations exist
            if "no destinations" in out.lower():
                return []
            raise PrinterError(f"lpstat failed (rc={proc.returncode}): {out}")
        return [line.strip() for line in proc.stdout.splitlines() if line.strip()]

    def build_command(self, job: PrintJob) -> list[str]:
        """Build the ``lp`` command line for a job."""
        width, height = job.paper_size
        if width <= 0 or height <= 0:
            raise PrintJobError(f"Invalid paper size {job.paper_size} for {job.pdf_path}", job.pdf_path)

        cmd = [
            self._lp_path,
            "-d", job.printer,
            "-t", job.job_title,
            "-o", f"sides={DUPLEX_LONG_EDGE}",
            "-o", f"job-hold-until={JOB_HOLD_NONE}",
            "-o", f"media=Custom.{width:g}x{height:g}",
        ]
        if job.scaling is ScalingMode.FIT:
            cmd += ["-o", "print-scaling=fit", "-o", "fit-to-page"]
        else:
            cmd += ["-o", "print-scaling=none"]
        cmd.append(str(job.pdf_path))
        return cmd

    def submit(self, job: PrintJob, dry_run: bool = False) -> bool:
        cmd = self.build_command(job)

        if dry_run:
            logger.info("[dry-run] Would execute: %s", " ".join(cmd))
            return True

        self._require(self._lp_path)
        logger.debug("Executing: %s", " ".join(cmd))
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
        )
        if proc.returncode != 0:
            out = ((proc.stdout or "") + (proc.stderr or "")).strip()
            raise PrintJobError(
                f"Print job rejected for {job.pdf_path}: {out or 'lp failed'}",
                job.pdf_path,
                context={"rc": proc.returncode},
            )
        if proc.stdout.strip():
            logger.debug("%s", proc.stdout.strip())
        return True
