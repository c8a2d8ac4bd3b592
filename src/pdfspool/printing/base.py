"""Abstract base class for printer backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from pdfspool.config import ScalingMode
from pdfspool.papersize import PaperSize


@dataclass(frozen=True)
class PrintJob:
    """A single silent print submission.

    Duplex (long edge) and spooled disposition are not configurable; every
    backend applies them to every job.
    """

    pdf_path: Path
    printer: str
    paper_size: PaperSize
    scaling: ScalingMode

    @property
    def job_title(self) -> str:
        return self.pdf_path.name


class PrinterBackend(ABC):
    """Abstract base class for printer backends.

    A backend is the bridge to the operating system's printer directory and
    print spooler. CupsBackend covers macOS and Linux, SumatraBackend covers
    Windows, and MockBackend records jobs for tests.

    Example:
        backend = get_default_backend()
        printers = backend.list_printers()
        backend.submit(PrintJob(path, printers[0], PAPER_SIZES["a4"], ScalingMode.FIT))
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier (e.g., 'cups', 'sumatra', 'mock')."""

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool:
        """Check if this backend can be used on the current platform."""

    @abstractmethod
    def list_printers(self) -> list[str]:
        """List installed printer names.

        Raises:
            PrinterError: If printer enumeration fails
        """

    @abstractmethod
    def submit(self, job: PrintJob, dry_run: bool = False) -> bool:
        """Submit a job to the spooler and wait until it is accepted.

        Args:
            job: The job to print
            dry_run: If True, only log what would be done

        Returns:
            True once the spooler has accepted the job

        Raises:
            PrintJobError: If the job cannot be built or is rejected
            PrinterError: If the backend itself is unusable
        """
