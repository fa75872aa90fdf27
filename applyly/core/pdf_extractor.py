"""
PDF text extraction by vertical-position line reconstruction.

pdfplumber supplies positioned word fragments per page. Fragments are grouped
into rows by their rounded vertical coordinate (PDF space, origin bottom-left),
and rows are emitted top to bottom.
"""

import logging
import math
from dataclasses import dataclass
from io import BytesIO
from typing import Any, Dict, Iterable, List, Tuple

import pdfplumber

from applyly.core.config import PDF_X_TOLERANCE

logger = logging.getLogger(__name__)

# (a, b, c, d, e, f): e is the horizontal, f the vertical translation
Transform = Tuple[float, float, float, float, float, float]


@dataclass(frozen=True)
class TextFragment:
    """One positioned piece of text as emitted by the page's content stream."""
    text: str
    transform: Transform

    @property
    def x(self) -> float:
        return self.transform[4]

    @property
    def y(self) -> float:
        return self.transform[5]

    @property
    def row_key(self) -> int:
        # Half-up rounding so x.5 coordinates land on the same row regardless of parity
        return math.floor(self.y + 0.5)


def group_fragments_into_lines(fragments: Iterable[TextFragment]) -> List[str]:
    """
    Reconstruct reading-order lines from one page of fragments.

    Fragments sharing a row key are joined with single spaces in their emission
    order; rows are ordered by descending vertical coordinate. Rows that are
    blank after trimming are dropped.
    """
    rows: Dict[int, List[str]] = {}
    for fragment in fragments:
        rows.setdefault(fragment.row_key, []).append(fragment.text)

    lines = []
    for key in sorted(rows, reverse=True):
        line = " ".join(rows[key]).strip()
        if line:
            lines.append(line)
    return lines


def _page_fragments(page: Any) -> List[TextFragment]:
    """Convert pdfplumber words into fragments carrying a PDF-space transform."""
    words = page.extract_words(
        x_tolerance=PDF_X_TOLERANCE,
        keep_blank_chars=False,
        use_text_flow=True,
    )
    height = float(page.height)
    return [
        TextFragment(
            text=w["text"],
            transform=(1.0, 0.0, 0.0, 1.0, float(w["x0"]), height - float(w["bottom"])),
        )
        for w in words
    ]


def extract_pdf_pages(pdf_bytes: bytes) -> List[List[str]]:
    """
    Extract ordered lines for every page, pages in document order.

    Pages are decoded sequentially. Decode errors from pdfplumber/pdfminer are
    not caught here.
    """
    pages: List[List[str]] = []
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        for page_i, page in enumerate(pdf.pages, start=1):
            lines = group_fragments_into_lines(_page_fragments(page))
            logger.debug(f"PDF page {page_i}: {len(lines)} lines")
            pages.append(lines)
    return pages


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """Full document text: each page's lines joined by newlines, each page newline-terminated."""
    return "".join("\n".join(lines) + "\n" for lines in extract_pdf_pages(pdf_bytes))
