from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from app.extraction.models import TextResult


@dataclass(slots=True)
class VerificationContext:
    document_path: Path
    aadhaar_number: str
    extraction: TextResult | None = None
    extracted_text: str = ""
    is_match: bool = False


class VerificationStep(ABC):
    @abstractmethod
    def run(self, context: VerificationContext) -> VerificationContext:
        raise NotImplementedError
