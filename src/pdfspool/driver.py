"""Batch print driver: print every file of an invocation, one at a time."""

from dataclasses import dataclass, field
from pathlib import Path

from pdfspool.config import InvocationConfig
from pdfspool.document import inspect_document
from pdfspool.exceptions import PerFileError
from pdfspool.logging_config import get_logger
from pdfspool.papersize import resolve_paper_size
from pdfspool.printing.base import PrinterBackend, PrintJob
from pdfspool.resolver import require_printer

logger = get_logger(__name__)


class PrintContext:
    """Handle to the printing subsystem, created once per run and passed explicitly.

    The installed-printer list is read from the backend on first use and
    reused for the rest of the run.
    """

    def __init__(self, backend: PrinterBackend):
        self.backend = backend
        self._printers: list[str] | None = None

    @property
    def available_printers(self) -> list[str]:
        if self._printers is None:
            self._printers = self.backend.list_printers()
            logger.debug("Backend '%s' reports printers: %s", self.backend.name, self._printers)
        return self._printers

    def resolve_printer(self, requested: str) -> str:
        """Resolve a user-supplied printer name.

        Raises:
            PrinterResolutionError: If no installed printer matches
        """
        return require_printer(requested, self.available_printers)


@dataclass
class BatchResult:
    """Counts accumulated over one batch."""

    attempted: int = 0
    printed: int = 0
    failures: list[Path] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def any_failed(self) -> bool:
        return bool(self.failures)

    @property
    def exit_code(self) -> int:
        return 1 if self.any_failed else 0


class BatchPrinter:
    """Print each configured file sequentially, honouring the fast-fail policy.

    Per-file failures (missing file, unreadable PDF, rejected job) are logged
    and either skipped or, with fast-fail, end the batch. A printer that cannot
    be resolved always ends the batch before any file is attempted.
    """

    def __init__(self, config: InvocationConfig, context: PrintContext):
        self.config = config
        self.context = context
        self.result = BatchResult()

    def print_file(self, pdf_path: Path, printer: str) -> None:
        """Print one document.

        Raises:
            PerFileError: If this document cannot be printed
        """
        document_size = inspect_document(pdf_path)
        paper_size = resolve_paper_size(self.config.paper_size, document_size)

        job = PrintJob(
            pdf_path=pdf_path,
            printer=printer,
            paper_size=paper_size,
            scaling=self.config.scaling,
        )
        logger.debug(
            "Submitting %s to '%s' (paper %s, scaling %s)",
            pdf_path, printer, paper_size, self.config.scaling.value,
        )
        self.context.backend.submit(job, dry_run=self.config.dry_run)

    def run(self) -> int:
        """Print the whole batch.

        Returns:
            0 if every file printed, 1 otherwise

        Raises:
            PrinterResolutionError: If the configured printer is not installed
            PrinterError: If the backend cannot enumerate printers or is unusable
        """
        printer = self.context.resolve_printer(self.config.printer)
        if printer != self.config.printer:
            logger.debug("Resolved printer '%s' to '%s'", self.config.printer, printer)

        total = len(self.config.files)
        for i, pdf_path in enumerate(self.config.files, 1):
            self.result.attempted += 1
            try:
                self.print_file(pdf_path, printer)
            except PerFileError as e:
                logger.error("%s", e)
                self.result.failures.append(pdf_path)
                if self.config.fast_fail:
                    logger.error("Stopping after first failure (--fast-fail)")
                    return 1
                continue

            self.result.printed += 1
            logger.info("[%d/%d] Sent %s to %s", i, total, pdf_path, printer)

        if self.result.any_failed:
            logger.warning(
                "%d of %d file(s) failed: %s",
                self.result.failed, total, ", ".join(str(p) for p in self.result.failures),
            )
        else:
            logger.info("Printed %d file(s)", self.result.printed)
        return self.result.exit_code


def run_batch(config: InvocationConfig, backend: PrinterBackend) -> int:
    """Convenience wrapper: build a PrintContext and run a BatchPrinter."""
    return BatchPrinter(config, PrintContext(backend)).run()
