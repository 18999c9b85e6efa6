from pathlib import Path

from app.config.settings import Settings
from app.extraction.text_extractor import TextExtractor, build_text_extractor
from app.logging.logger import Log
from app.verification.exceptions import InvalidIdentifierError, TextExtractionFailedError
from app.verification.models import VerificationOutcome, VerificationStatus
from app.verification.pipeline import VerificationContext, VerificationStep
from app.verification.steps import ExtractTextStep, MatchIdentifierStep, ValidateIdentifierStep


class DocumentVerifier:
    """Checks whether an Aadhaar number appears in an uploaded PDF.

    Pipeline: validate number -> extract text -> match.

    The verifier owns the uploaded document: it is deleted exactly once when
    verify() returns or raises.
    """

    def __init__(self, steps: list[VerificationStep]) -> None:
        self._steps = steps

    def verify(self, document_path: Path | str, aadhaar_number: str) -> VerificationOutcome:
        document_path = Path(document_path)
        Log.info(f"Verifying document {document_path}")
        context = VerificationContext(document_path=document_path, aadhaar_number=aadhaar_number)
        try:
            for step in self._steps:
                context = step.run(context)
        except InvalidIdentifierError as exc:
            Log.warning(f"Rejected verification request: {exc}")
            return VerificationOutcome(status=VerificationStatus.INVALID_INPUT, message=str(exc))
        except TextExtractionFailedError as exc:
            Log.error(f"Failed to extract text from {document_path}: {exc.failure.reason}")
            return VerificationOutcome(
                status=VerificationStatus.EXTRACTION_FAILED,
                message="Failed to extract text from PDF",
                extracted_text=exc.failure.message,
            )
        finally:
            self._discard_document(document_path)

        if context.is_match:
            return VerificationOutcome(
                status=VerificationStatus.VALID,
                message="Valid Aadhaar",
                confidence=100,
                extracted_text=context.extracted_text,
            )
        return VerificationOutcome(
            status=VerificationStatus.MISMATCH,
            message="Aadhaar Mismatch",
            confidence=0,
            extracted_text=context.extracted_text,
        )

    def _discard_document(self, document_path: Path) -> None:
        try:
            document_path.unlink()
        except FileNotFoundError:
            Log.warning(f"Document already gone: {document_path}")
        except OSError as exc:
            Log.error(f"Error deleting file {document_path}: {exc}")
        else:
            Log.debug(f"Deleted document {document_path}")


def build_verifier(
    settings: Settings,
    text_extractor: TextExtractor | None = None,
) -> DocumentVerifier:
    """Build a DocumentVerifier with all required steps."""
    extractor = text_extractor if text_extractor is not None else build_text_extractor(settings)
    return DocumentVerifier(
        steps=[
            ValidateIdentifierStep(),
            ExtractTextStep(text_extractor=extractor),
            MatchIdentifierStep(),
        ]
    )
