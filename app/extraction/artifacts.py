from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import TracebackType

from app.logging.logger import Log


class RasterArtifacts:
    """Raster images created during one extraction.

    hold() scopes an image to the block that uses it. Leaving the
    extraction scope sweeps anything still registered.
    """

    def __init__(self) -> None:
        self._paths: set[Path] = set()

    def __enter__(self) -> "RasterArtifacts":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release_all()

    @property
    def outstanding(self) -> frozenset[Path]:
        return frozenset(self._paths)

    @contextmanager
    def hold(self, image_path: Path) -> Iterator[Path]:
        self._paths.add(image_path)
        try:
            yield image_path
        finally:
            self.release(image_path)

    def release(self, image_path: Path) -> None:
        """Delete one image. Failures are logged and the path stays registered."""
        try:
            image_path.unlink(missing_ok=True)
        except OSError as exc:
            Log.error(f"Error deleting image {image_path}: {exc}")
            return
        self._paths.discard(image_path)
        Log.debug(f"Deleted image {image_path}")

    def release_all(self) -> None:
        for image_path in sorted(self._paths):
            self.release(image_path)
        if self._paths:
            Log.error(f"Could not delete {len(self._paths)} image(s): {sorted(self._paths)}")
            self._paths.clear()
