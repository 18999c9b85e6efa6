from app.extraction.models import ExtractionFailure


class VerificationError(Exception):
    """Base exception for all verification-related errors."""


class InvalidIdentifierError(VerificationError):
    """Raised when the supplied Aadhaar number is not twelve digits."""


class TextExtractionFailedError(VerificationError):
    """Raised when the document yields no usable text."""

    def __init__(self, failure: ExtractionFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


class UploadRejectedError(VerificationError):
    """Raised when an upload is too large or is not a PDF."""
