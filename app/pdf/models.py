from dataclasses import dataclass


@dataclass(frozen=True)
class PdfText:
    """Embedded text layer and page count read in a single pass."""

    text: str
    page_count: int
