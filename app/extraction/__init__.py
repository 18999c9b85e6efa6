from app.extraction.models import ExtractedText, ExtractionFailure, FailureKind, TextResult, TextSource
from app.extraction.text_extractor import TextExtractor, build_text_extractor

__all__ = [
    "ExtractedText",
    "ExtractionFailure",
    "FailureKind",
    "TextExtractor",
    "TextResult",
    "TextSource",
    "build_text_extractor",
]
