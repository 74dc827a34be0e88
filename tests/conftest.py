import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from bidleveler.preprocessing.models import Document

BID_TEXT = """CONFIDENTIAL DOCUMENT - Acme Builders
Document ID: BID-2024-017
Revision: 3
Date: 03/15/2024

PROJECT OVERVIEW:
Acme Builders proposes to construct the new municipal library.
In accordance with standard construction practices all work will be supervised.

PRICING:
Total Project Cost: $82,300,000
Materials: $31,000,000
Labor: $40,500,000

SCHEDULE:
Construction will take 18 months from notice to proceed.

Page 1 of 2
Visit www.acme-builders.com for more information.
"""


@pytest.fixture()
def bid_text() -> str:
    """A short bid with headers, boilerplate, a pricing section and a schedule."""
    return BID_TEXT


@pytest.fixture()
def bid_document(bid_text: str) -> Document:
    return Document(name="acme.txt", content=bid_text)


@pytest.fixture()
def long_bid_text() -> str:
    """A bid far above the default budget with costs near the end."""
    filler = "The contractor will coordinate all site activities carefully. " * 400
    return (
        "BID SUMMARY:\nNorthwind Construction submits this bid for the bridge.\n\n"
        f"{filler}\n\n"
        "PRICING:\nTotal Project Cost: $82,300,000\nContingency: $1,200,000\n"
    )


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Total Project Cost: $4,500,000")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Scope of work")
    c.showPage()
    c.drawString(72, 720, "Pricing summary")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()
