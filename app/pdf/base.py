from abc import ABC, abstractmethod
from pathlib import Path

from app.pdf.models import PdfText


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, document_path: Path) -> PdfText:
        """Read the embedded text layer and page count of a PDF.

        Args:
            document_path: Location of the PDF on local storage.

        Returns:
            PdfText with the joined, stripped page text and the number of pages.

        Raises:
            PdfExtractionError: if the document cannot be opened or parsed.
        """
