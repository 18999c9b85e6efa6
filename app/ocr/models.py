from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RasterOptions:
    """Rendering parameters shared by every page of one extraction."""

    output_dir: Path
    dpi: int = 200
    width: int = 1000
    height: int = 1414  # A4 at 200 DPI, fitted inside width x height
