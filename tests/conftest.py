from pathlib import Path

import pytest
from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas


def write_pdf(path: Path, pages: list[str | None]) -> Path:
    """Write a PDF with one page per entry; None leaves the page blank."""
    c = canvas.Canvas(str(path), pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return path


def write_scanned_pdf(path: Path, lines: list[str]) -> Path:
    """Write an image-only PDF, one page per line, with no text layer."""
    font = ImageFont.load_default(size=64)
    c = canvas.Canvas(str(path), pagesize=letter)
    width, height = letter
    for line in lines:
        image = Image.new("RGB", (1700, 2200), "white")
        ImageDraw.Draw(image).text((120, 200), line, fill="black", font=font)
        c.drawImage(ImageReader(image), 0, 0, width=width, height=height)
        c.showPage()
    c.save()
    return path


@pytest.fixture()
def text_pdf_path(tmp_path: Path) -> Path:
    """Single-page PDF whose text layer carries an Aadhaar number."""
    return write_pdf(tmp_path / "aadhaar.pdf", ["Aadhaar Number 987654321098"])


@pytest.fixture()
def multi_page_pdf_path(tmp_path: Path) -> Path:
    return write_pdf(tmp_path / "multi.pdf", ["Page one content", "Page two content"])


@pytest.fixture()
def blank_pdf_path(tmp_path: Path) -> Path:
    """Two-page PDF without any text layer."""
    return write_pdf(tmp_path / "blank.pdf", [None, None])


@pytest.fixture()
def short_text_pdf_path(tmp_path: Path) -> Path:
    """Text layer present but too short to trust."""
    return write_pdf(tmp_path / "short.pdf", ["ID card"])


@pytest.fixture()
def not_a_pdf_path(tmp_path: Path) -> Path:
    path = tmp_path / "garbage.pdf"
    path.write_bytes(b"not a pdf")
    return path


@pytest.fixture()
def artifacts_dir(tmp_path: Path) -> Path:
    path = tmp_path / "artifacts"
    path.mkdir()
    return path
