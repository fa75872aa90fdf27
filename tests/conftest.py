"""
Shared fixtures.

make_pdf builds small but real PDF documents (one Helvetica text line per
resume line) so tests exercise the pdfplumber extraction path end to end.
"""

from typing import List

import pytest

PAGE_TOP = 740
LINE_HEIGHT = 16
LEFT_MARGIN = 72


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: List[List[str]]) -> bytes:
    """Assemble a PDF with one page per entry of `pages`, lines top to bottom."""
    objects: List[bytes] = []

    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)

    objects.append(b"<< /Type /Catalog /Pages 2 0 R >>")
    objects.append(f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode())
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    for page_id, lines in zip(page_ids, pages):
        ops = [
            f"BT /F1 11 Tf {LEFT_MARGIN} {PAGE_TOP - i * LINE_HEIGHT} Td ({_escape(line)}) Tj ET"
            for i, line in enumerate(lines)
        ]
        stream = "\n".join(ops).encode("latin-1")
        objects.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>".encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_at)
    return bytes(out)


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def sample_resume_pdf(make_pdf):
    """Two-page resume: contact header and experience on page 1, skills on page 2."""
    return make_pdf([
        [
            "Jane Doe",
            "jane.doe@example.com | (555) 123-4567",
            "San Francisco, CA",
            "EXPERIENCE",
            "Software Engineer at Acme Inc 2019 - 2021",
            "- Built data pipelines processing millions of records daily",
        ],
        [
            "SKILLS",
            "Python, SQL, Leadership",
        ],
    ])
