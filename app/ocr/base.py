from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from app.ocr.models import RasterOptions


class BasePageRasterizer(ABC):
    """Contract for adapters that render one PDF page to an image file."""

    @abstractmethod
    def rasterize(
        self,
        document_path: Path,
        page_index: int,
        options: RasterOptions,
    ) -> Path:
        """Render a single page to a new image inside options.output_dir.

        Args:
            document_path: Location of the PDF on local storage.
            page_index: 1-based page number.
            options: Resolution, target size and output directory.

        Returns:
            Path of the written image. The name is unique per call.

        Raises:
            RasterizationError: if the page cannot be rendered or written.
        """


class BaseOcrEngine(ABC):
    """Contract for text recognition adapters."""

    @abstractmethod
    def recognize(
        self,
        image_path: Path,
        languages: Sequence[str],
        timeout_seconds: float,
    ) -> str:
        """Recognize text in an image.

        Raises:
            OcrError: on any failure, OcrTimeoutError when the budget is exceeded.
        """
