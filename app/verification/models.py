from dataclasses import asdict, dataclass
from enum import Enum


class VerificationStatus(str, Enum):
    VALID = "valid"
    MISMATCH = "mismatch"
    INVALID_INPUT = "invalid_input"
    EXTRACTION_FAILED = "extraction_failed"


@dataclass(frozen=True)
class VerificationOutcome:
    """Answer to one document verification request."""

    status: VerificationStatus
    message: str
    confidence: int = 0
    extracted_text: str = ""

    @property
    def is_match(self) -> bool:
        return self.status is VerificationStatus.VALID

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        payload["status"] = self.status.value
        return payload
