"""Paper size table for pdfspool.

Every size is stored in PDF points, portrait orientation (width <= height),
except ``ledger`` which is tabloid turned sideways by definition.
"""

from typing import NamedTuple

from pdfspool.constants import UNIT_TO_POINTS

# Use the source document's own first-page size
PDF_SENTINEL = "pdf"


class PaperSize(NamedTuple):
    """Physical paper dimensions in points."""

    width: float
    height: float

    @classmethod
    def from_mm(cls, width: float, height: float) -> "PaperSize":
        factor = UNIT_TO_POINTS["mm"]
        return cls(round(width * factor, 2), round(height * factor, 2))

    @classmethod
    def from_inches(cls, width: float, height: float) -> "PaperSize":
        factor = UNIT_TO_POINTS["in"]
        return cls(width * factor, height * factor)

    def __str__(self) -> str:
        return f"{self.width:g} x {self.height:g} pt"


# ISO 216 / ISO 269 series in millimetres
_ISO_A_MM = [
    (841, 1189), (594, 841), (420, 594), (297, 420), (210, 297), (148, 210),
    (105, 148), (74, 105), (52, 74), (37, 52), (26, 37),
]
_ISO_B_MM = [
    (1000, 1414), (707, 1000), (500, 707), (353, 500), (250, 353), (176, 250),
    (125, 176), (88, 125), (62, 88), (44, 62), (31, 44),
]
_ISO_C_MM = [
    (917, 1297), (648, 917), (458, 648), (324, 458), (229, 324), (162, 229),
    (114, 162), (81, 114), (57, 81), (40, 57), (28, 40),
]


def _iso_series(prefix: str, sizes_mm: list[tuple[int, int]]) -> dict[str, PaperSize]:
    return {f"{prefix}{i}": PaperSize.from_mm(w, h) for i, (w, h) in enumerate(sizes_mm)}


PAPER_SIZES: dict[str, PaperSize] = {
    **_iso_series("a", _ISO_A_MM),
    **_iso_series("b", _ISO_B_MM),
    **_iso_series("c", _ISO_C_MM),
    # North American
    "letter": PaperSize(612.0, 792.0),
    "legal": PaperSize(612.0, 1008.0),
    "tabloid": PaperSize(792.0, 1224.0),
    "ledger": PaperSize(1224.0, 792.0),
    "executive": PaperSize(522.0, 756.0),
    "statement": PaperSize(396.0, 612.0),
    # Photo
    "photo4x6": PaperSize.from_inches(4, 6),
    "photo5x7": PaperSize.from_inches(5, 7),
    "photo8x10": PaperSize.from_inches(8, 10),
}

PAPER_SIZE_TOKENS = sorted([*PAPER_SIZES, PDF_SENTINEL])


def resolve_paper_size(token: str, document_size: PaperSize) -> PaperSize:
    """Pick the paper size for one document.

    Args:
        token: Validated, lower-case paper size token
        document_size: First-page size of the document being printed

    Returns:
        ``document_size`` for the ``pdf`` sentinel, otherwise the table entry
    """
    if token == PDF_SENTINEL:
        return document_size
    return PAPER_SIZES[token]
