import shutil
import uuid
from pathlib import Path

from app.verification.exceptions import UploadRejectedError

PDF_MAGIC = b"%PDF-"


def staged_file_path(uploads_dir: Path) -> Path:
    """Build path for a staged upload: {uploads_dir}/{uuid4}.pdf"""
    return uploads_dir / f"{uuid.uuid4().hex}.pdf"


class UploadStager:
    """Copies an incoming file into the uploads directory under a unique name."""

    def __init__(self, uploads_dir: Path, max_bytes: int) -> None:
        self._uploads_dir = uploads_dir
        self._max_bytes = max_bytes

    def stage(self, source: Path) -> Path:
        """Validate and copy an upload.

        Raises:
            FileNotFoundError: if source does not exist.
            UploadRejectedError: if source is over the size limit or not a PDF.
        """
        if not source.is_file():
            raise FileNotFoundError(f"File not found: {source}")
        size = source.stat().st_size
        if size > self._max_bytes:
            raise UploadRejectedError(
                f"File is {size} bytes, limit is {self._max_bytes} bytes"
            )
        with source.open("rb") as fh:
            if fh.read(len(PDF_MAGIC)) != PDF_MAGIC:
                raise UploadRejectedError("Only PDF files are allowed")

        self._uploads_dir.mkdir(parents=True, exist_ok=True)
        target = staged_file_path(self._uploads_dir)
        shutil.copyfile(source, target)
        return target
