import asyncio
import threading
from collections.abc import Iterator, Sequence
from pathlib import Path

from app.config.settings import Settings
from app.extraction.artifacts import RasterArtifacts
from app.extraction.models import (
    DirectText,
    ExtractedText,
    ExtractionFailure,
    FailureKind,
    PageFailure,
    PageOutcome,
    PageStage,
    PageText,
    TextResult,
    TextSource,
)
from app.extraction.planning import fold_page_outcomes, plan_extraction
from app.logging.logger import Log
from app.ocr.base import BaseOcrEngine, BasePageRasterizer
from app.ocr.exceptions import OcrError, RasterizationError
from app.ocr.models import RasterOptions
from app.ocr.pymupdf_rasterizer import PyMuPdfRasterizer
from app.ocr.tesseract_adapter import TesseractAdapter
from app.pdf.base import BasePdfExtractor
from app.pdf.factory import PdfExtractorFactory


class TextExtractor:
    """Extracts text from a PDF, falling back to per-page OCR.

    Pipeline: text layer -> (if too short) rasterize + OCR each page -> aggregate.

    The extractor never deletes the input document; that is the caller's job.
    It does own every raster image it creates and removes all of them before
    returning, whatever the outcome.
    """

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        rasterizer: BasePageRasterizer,
        ocr_engine: BaseOcrEngine,
        raster_options: RasterOptions,
        languages: Sequence[str] = ("eng", "hin"),
        ocr_timeout_seconds: float = 60.0,
        min_direct_text_length: int = 10,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._rasterizer = rasterizer
        self._ocr_engine = ocr_engine
        self._raster_options = raster_options
        self._languages = tuple(languages)
        self._ocr_timeout_seconds = ocr_timeout_seconds
        self._min_direct_text_length = min_direct_text_length

    def extract_text(
        self,
        document_path: Path | str,
        cancel_event: threading.Event | None = None,
    ) -> TextResult:
        """Return the document text or a failure value. Never raises.

        If cancel_event is set while pages are being processed, the remaining
        pages are skipped and whatever was recognized so far is aggregated.
        """
        document_path = Path(document_path)
        Log.info(f"Starting text extraction for {document_path}")
        try:
            with RasterArtifacts() as artifacts:
                pdf_text = self._pdf_extractor.extract(document_path)
                plan = plan_extraction(pdf_text, self._min_direct_text_length)
                if isinstance(plan, DirectText):
                    Log.info(
                        f"Sufficient text layer in {document_path}: {len(plan.text)} chars"
                    )
                    return ExtractedText(text=plan.text, source=TextSource.DIRECT)

                Log.info(
                    f"Insufficient text layer in {document_path}, "
                    f"running OCR over {plan.page_count} page(s)"
                )
                aggregate = fold_page_outcomes(
                    self._ocr_pages(document_path, plan.page_count, artifacts, cancel_event)
                )
        except Exception as exc:
            Log.exception(f"Text extraction failed for {document_path}: {exc}")
            return ExtractionFailure(kind=FailureKind.DOCUMENT_UNREADABLE, reason=str(exc))

        if not aggregate.recognized_any:
            Log.error(f"No text extracted from any page of {document_path}")
            return ExtractionFailure(
                kind=FailureKind.NO_TEXT_EXTRACTED, reason="no text extracted"
            )
        Log.info(f"OCR produced {len(aggregate.text)} chars for {document_path}")
        return ExtractedText(text=aggregate.text, source=TextSource.OCR)

    async def extract_text_async(self, document_path: Path | str) -> TextResult:
        """Run extract_text in a worker thread.

        Cancelling the awaiting task stops page processing after the page in
        flight; that page's image is still removed.
        """
        cancel_event = threading.Event()
        try:
            return await asyncio.to_thread(self.extract_text, document_path, cancel_event)
        except asyncio.CancelledError:
            cancel_event.set()
            raise

    def _ocr_pages(
        self,
        document_path: Path,
        page_count: int,
        artifacts: RasterArtifacts,
        cancel_event: threading.Event | None,
    ) -> Iterator[PageOutcome]:
        for page_index in range(1, page_count + 1):
            if cancel_event is not None and cancel_event.is_set():
                Log.warning(
                    f"Extraction of {document_path} cancelled before page "
                    f"{page_index} of {page_count}"
                )
                return
            yield self._process_page(document_path, page_index, artifacts)

    def _process_page(
        self,
        document_path: Path,
        page_index: int,
        artifacts: RasterArtifacts,
    ) -> PageOutcome:
        try:
            image_path = self._rasterizer.rasterize(
                document_path, page_index, self._raster_options
            )
        except RasterizationError as exc:
            Log.warning(f"PDF to image conversion failed for page {page_index}: {exc}")
            return PageFailure(page_index, PageStage.RASTERIZE, str(exc))
        except Exception as exc:
            Log.warning(f"Unexpected error converting page {page_index}: {exc!r}")
            return PageFailure(page_index, PageStage.RASTERIZE, str(exc))

        with artifacts.hold(image_path):
            if not image_path.exists():
                Log.warning(f"No image written for page {page_index}: {image_path}")
                return PageFailure(page_index, PageStage.RASTERIZE, "image file missing")
            try:
                text = self._ocr_engine.recognize(
                    image_path, self._languages, self._ocr_timeout_seconds
                )
            except OcrError as exc:
                Log.warning(f"OCR processing failed for page {page_index}: {exc}")
                return PageFailure(page_index, PageStage.OCR, str(exc))
            except Exception as exc:
                Log.warning(f"Unexpected error recognizing page {page_index}: {exc!r}")
                return PageFailure(page_index, PageStage.OCR, str(exc))

        Log.debug(f"OCR completed for page {page_index}: {text[:100]!r}")
        return PageText(page_index, text)


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Build a TextExtractor with the configured adapters."""
    return TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        rasterizer=PyMuPdfRasterizer(),
        ocr_engine=TesseractAdapter(settings.tesseract_cmd),
        raster_options=RasterOptions(
            output_dir=Path(settings.artifacts_dir),
            dpi=settings.raster_dpi,
            width=settings.raster_width,
            height=settings.raster_height,
        ),
        languages=settings.ocr_languages,
        ocr_timeout_seconds=settings.ocr_timeout_seconds,
        min_direct_text_length=settings.min_direct_text_length,
    )
