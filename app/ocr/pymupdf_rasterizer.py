import uuid
from pathlib import Path

import pymupdf
from PIL import Image

from app.ocr.base import BasePageRasterizer
from app.ocr.exceptions import RasterizationError
from app.ocr.models import RasterOptions


def artifact_file_name(page_index: int) -> str:
    """Build a collision-free image name: page-{uuid4}-{page_index}.png"""
    return f"page-{uuid.uuid4().hex}-{page_index}.png"


class PyMuPdfRasterizer(BasePageRasterizer):
    """Renders PDF pages with PyMuPDF and writes them as PNG via Pillow."""

    def rasterize(
        self,
        document_path: Path,
        page_index: int,
        options: RasterOptions,
    ) -> Path:
        image_path = Path(options.output_dir) / artifact_file_name(page_index)
        try:
            with pymupdf.open(document_path, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if not 1 <= page_index <= doc.page_count:
                    raise RasterizationError(
                        f"page {page_index} out of range (document has {doc.page_count})"
                    )
                pixmap = doc[page_index - 1].get_pixmap(dpi=options.dpi, alpha=False)
            image = Image.frombytes("RGB", (pixmap.width, pixmap.height), pixmap.samples)
            image.thumbnail((options.width, options.height))
            image_path.parent.mkdir(parents=True, exist_ok=True)
            # shrinking lowers the resolution Tesseract should assume
            effective_dpi = round(options.dpi * image.width / pixmap.width)
            image.save(image_path, format="PNG", dpi=(effective_dpi, effective_dpi))
        except RasterizationError:
            raise
        except Exception as exc:
            # a failed save may leave a truncated file behind
            image_path.unlink(missing_ok=True)
            raise RasterizationError(
                f"rasterizing page {page_index} failed: {exc}"
            ) from exc
        return image_path
