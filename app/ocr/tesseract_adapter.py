from collections.abc import Sequence
from pathlib import Path

import pytesseract

from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError, OcrTimeoutError


class TesseractAdapter(BaseOcrEngine):
    """Runs the Tesseract binary through pytesseract.

    The timeout is enforced by pytesseract, which kills the subprocess once
    the budget is spent and raises RuntimeError.
    """

    def __init__(self, tesseract_cmd: str = "") -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(
        self,
        image_path: Path,
        languages: Sequence[str],
        timeout_seconds: float,
    ) -> str:
        if not languages:
            raise OcrError("at least one OCR language is required")
        try:
            return pytesseract.image_to_string(
                str(image_path),
                lang="+".join(languages),
                timeout=timeout_seconds,
            )
        except pytesseract.TesseractError as exc:
            raise OcrError(f"tesseract failed: {exc}") from exc
        except RuntimeError as exc:
            raise OcrTimeoutError(
                f"tesseract exceeded {timeout_seconds}s timeout"
            ) from exc
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
