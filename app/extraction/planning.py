from collections.abc import Iterable

from app.extraction.models import (
    DirectText,
    ExtractionPlan,
    NeedsOcr,
    OcrAggregate,
    PageOutcome,
    PageStage,
    PageText,
)
from app.pdf.models import PdfText


def plan_extraction(pdf_text: PdfText, min_direct_text_length: int) -> ExtractionPlan:
    """Decide between the embedded text layer and the OCR fallback.

    The text layer wins when its stripped length is strictly greater than
    min_direct_text_length. Otherwise the page count from the same pass is
    reused; a negative or missing count is treated as zero pages.
    """
    if len(pdf_text.text.strip()) > min_direct_text_length:
        return DirectText(text=pdf_text.text)
    return NeedsOcr(page_count=max(pdf_text.page_count or 0, 0))


def ocr_failure_placeholder(page_index: int, reason: str) -> str:
    return f"OCR failed for page {page_index}: {reason}"


def fold_page_outcomes(outcomes: Iterable[PageOutcome]) -> OcrAggregate:
    """Fold per-page results into one text block.

    Recognized pages contribute their text followed by a newline. OCR
    failures contribute a placeholder line. Rasterization failures
    contribute nothing.
    """
    parts: list[str] = []
    recognized_any = False
    for outcome in outcomes:
        if isinstance(outcome, PageText):
            parts.append(outcome.text + "\n")
            recognized_any = recognized_any or bool(outcome.text.strip())
        elif outcome.stage is PageStage.OCR:
            parts.append(ocr_failure_placeholder(outcome.page_index, outcome.reason) + "\n")
    return OcrAggregate(text="".join(parts), recognized_any=recognized_any)
