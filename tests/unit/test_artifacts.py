from pathlib import Path
from unittest.mock import patch

import pytest

from app.extraction.artifacts import RasterArtifacts


def _touch(path: Path) -> Path:
    path.write_bytes(b"\x89PNG")
    return path


class TestHold:
    def test_deletes_image_on_normal_exit(self, tmp_path: Path) -> None:
        image = _touch(tmp_path / "page-1.png")
        artifacts = RasterArtifacts()

        with artifacts.hold(image):
            assert artifacts.outstanding == {image}

        assert not image.exists()
        assert artifacts.outstanding == frozenset()

    def test_deletes_image_when_block_raises(self, tmp_path: Path) -> None:
        image = _touch(tmp_path / "page-1.png")
        artifacts = RasterArtifacts()

        with pytest.raises(ValueError):
            with artifacts.hold(image):
                raise ValueError("ocr crashed")

        assert not image.exists()

    def test_missing_image_is_not_an_error(self, tmp_path: Path) -> None:
        with RasterArtifacts().hold(tmp_path / "never-written.png"):
            pass


class TestReleaseAll:
    def test_context_exit_sweeps_outstanding_images(self, tmp_path: Path) -> None:
        first = _touch(tmp_path / "page-1.png")
        second = _touch(tmp_path / "page-2.png")

        with pytest.raises(RuntimeError):
            with RasterArtifacts() as artifacts:
                # entered but never exited, as when a thread dies mid-page
                artifacts.hold(first).__enter__()
                artifacts.hold(second).__enter__()
                raise RuntimeError("interrupted")

        assert not first.exists()
        assert not second.exists()

    def test_delete_failure_is_logged_not_raised(self, tmp_path: Path) -> None:
        image = _touch(tmp_path / "page-1.png")
        artifacts = RasterArtifacts()

        with (
            patch.object(Path, "unlink", side_effect=PermissionError("locked")),
            patch("app.extraction.artifacts.Log") as mock_log,
        ):
            with artifacts.hold(image):
                pass
            assert artifacts.outstanding == {image}
            artifacts.release_all()

        assert artifacts.outstanding == frozenset()
        assert mock_log.error.call_count >= 2
