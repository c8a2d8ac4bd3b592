"""Mock printer backend for testing and rehearsal runs."""

from pdfspool.exceptions import PrintJobError
from pdfspool.logging_config import get_logger
from pdfspool.printing.base import PrinterBackend, PrintJob

logger = get_logger(__name__)


class MockBackend(PrinterBackend):
    """Mock printer backend.

    Records every submitted job for verification in tests.

    Example:
        backend = MockBackend(printers=["Office LaserJet"])
        backend.submit(job)
        assert backend.jobs == [job]
    """

    name = "mock"

    def __init__(
        self,
        printers: list[str] | None = None,
        fail_on_submit: bool = False,
        fail_paths: set | None = None,
    ):
        """Initialize mock backend.

        Args:
            printers: Names returned from list_printers()
            fail_on_submit: If True, every submit() raises PrintJobError
            fail_paths: Individual PDF paths whose submission should fail
        """
        self.printers = printers if printers is not None else ["Mock Printer 1", "Mock Printer 2"]
        self.fail_on_submit = fail_on_submit
        self.fail_paths = set(fail_paths or ())
        self.jobs: list[PrintJob] = []

    @classmethod
    def is_available(cls) -> bool:
        return True

    def list_printers(self) -> list[str]:
        return list(self.printers)

    def submit(self, job: PrintJob, dry_run: bool = False) -> bool:
        self.jobs.append(job)

        if dry_run:
            logger.info("[dry-run] Would print %s to %s (%s)", job.pdf_path, job.printer, job.paper_size)
            return True

        if self.fail_on_submit or job.pdf_path in self.fail_paths:
            raise PrintJobError(f"Mock submission failed for {job.pdf_path}", job.pdf_path)
        logger.debug("Mock printed %s on %s", job.pdf_path, job.printer)
        return True

    def reset(self) -> None:
        """Clear recorded jobs."""
        self.jobs.clear()
