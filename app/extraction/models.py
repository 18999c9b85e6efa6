from dataclasses import dataclass
from enum import Enum


class TextSource(str, Enum):
    DIRECT = "direct"
    OCR = "ocr"


class FailureKind(str, Enum):
    DOCUMENT_UNREADABLE = "document_unreadable"
    NO_TEXT_EXTRACTED = "no_text_extracted"


class PageStage(str, Enum):
    RASTERIZE = "rasterize"
    OCR = "ocr"


@dataclass(frozen=True)
class ExtractedText:
    """Successful extraction and the path that produced it."""

    text: str
    source: TextSource


@dataclass(frozen=True)
class ExtractionFailure:
    """Extraction finished without usable text."""

    kind: FailureKind
    reason: str

    @property
    def message(self) -> str:
        if self.kind is FailureKind.NO_TEXT_EXTRACTED:
            return "No text extracted from PDF"
        return f"No text extracted (general error: {self.reason})"


TextResult = ExtractedText | ExtractionFailure


@dataclass(frozen=True)
class DirectText:
    """The embedded text layer is sufficient on its own."""

    text: str


@dataclass(frozen=True)
class NeedsOcr:
    """The text layer is too thin; every page has to be recognized."""

    page_count: int


ExtractionPlan = DirectText | NeedsOcr


@dataclass(frozen=True)
class PageText:
    page_index: int
    text: str


@dataclass(frozen=True)
class PageFailure:
    page_index: int
    stage: PageStage
    reason: str


PageOutcome = PageText | PageFailure


@dataclass(frozen=True)
class OcrAggregate:
    """Concatenated page output plus whether any page yielded real text."""

    text: str
    recognized_any: bool
