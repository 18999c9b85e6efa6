from app.extraction.models import ExtractionFailure
from app.extraction.text_extractor import TextExtractor
from app.logging.logger import Log
from app.verification.exceptions import InvalidIdentifierError, TextExtractionFailedError
from app.verification.matcher import contains_identifier, is_valid_aadhaar_format, normalize_text
from app.verification.pipeline import VerificationContext, VerificationStep


class ValidateIdentifierStep(VerificationStep):
    def run(self, context: VerificationContext) -> VerificationContext:
        if not is_valid_aadhaar_format(context.aadhaar_number):
            raise InvalidIdentifierError("Invalid Aadhaar number. Must be 12 digits.")
        return context


class ExtractTextStep(VerificationStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: VerificationContext) -> VerificationContext:
        result = self._text_extractor.extract_text(context.document_path)
        context.extraction = result
        if isinstance(result, ExtractionFailure):
            raise TextExtractionFailedError(result)
        context.extracted_text = result.text
        Log.info(
            f"Extracted {len(result.text)} chars from {context.document_path} "
            f"via {result.source.value}"
        )
        return context


class MatchIdentifierStep(VerificationStep):
    def run(self, context: VerificationContext) -> VerificationContext:
        if context.extraction is None:
            raise ValueError("VerificationContext.extraction must be set before matching")
        context.is_match = contains_identifier(context.extracted_text, context.aadhaar_number)
        Log.debug(f"Normalized extracted text: {normalize_text(context.extracted_text)[:200]}")
        Log.info(f"Match found: {context.is_match}")
        return context
