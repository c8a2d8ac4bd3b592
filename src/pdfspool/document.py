"""Open PDF documents and read their page geometry."""

from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from pdfspool.exceptions import DocumentError
from pdfspool.logging_config import get_logger
from pdfspool.papersize import PaperSize

logger = get_logger(__name__)


def inspect_document(pdf_path: Path) -> PaperSize:
    """Return the mediabox size of the first page of a PDF.

    Args:
        pdf_path: Path to the PDF file

    Returns:
        PaperSize of page 1 in points

    Raises:
        DocumentError: If the file is missing, is a directory, cannot be
            parsed, or has no pages
    """
    if not pdf_path.exists() or pdf_path.is_dir():
        raise DocumentError(f"PDF file not found at path: {pdf_path}", pdf_path)

    try:
        reader = PdfReader(str(pdf_path))
        if len(reader.pages) == 0:
            raise DocumentError(f"PDF has no pages: {pdf_path}", pdf_path)
        mediabox = reader.pages[0].mediabox
    except (PdfReadError, OSError, ValueError) as e:
        raise DocumentError(f"Failed to load PDF or its first page: {pdf_path}", pdf_path) from e

    size = PaperSize(float(mediabox.width), float(mediabox.height))
    logger.debug("%s: first page is %s", pdf_path, size)
    return size
