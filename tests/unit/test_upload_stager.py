from pathlib import Path

import pytest

from app.verification.exceptions import UploadRejectedError
from app.verification.upload_stager import UploadStager


class TestStage:
    def test_copies_pdf_under_unique_name(self, text_pdf_path: Path, tmp_path: Path) -> None:
        uploads = tmp_path / "uploads"
        stager = UploadStager(uploads, max_bytes=5 * 1024 * 1024)

        first = stager.stage(text_pdf_path)
        second = stager.stage(text_pdf_path)

        assert first != second
        assert first.parent == uploads
        assert first.read_bytes() == text_pdf_path.read_bytes()
        assert text_pdf_path.exists()

    def test_rejects_oversized_file(self, text_pdf_path: Path, tmp_path: Path) -> None:
        stager = UploadStager(tmp_path / "uploads", max_bytes=10)
        with pytest.raises(UploadRejectedError, match="limit"):
            stager.stage(text_pdf_path)

    def test_rejects_non_pdf(self, tmp_path: Path) -> None:
        source = tmp_path / "photo.pdf"
        source.write_bytes(b"\x89PNG\r\n\x1a\n")
        with pytest.raises(UploadRejectedError, match="Only PDF"):
            UploadStager(tmp_path / "uploads", max_bytes=1024).stage(source)

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="missing"):
            UploadStager(tmp_path / "uploads", max_bytes=1024).stage(tmp_path / "missing.pdf")
