class PageProcessingError(Exception):
    """Base exception for failures confined to a single page."""


class RasterizationError(PageProcessingError):
    """Raised when a PDF page cannot be rendered to an image."""


class OcrError(PageProcessingError):
    """Raised when text recognition over a page image fails."""


class OcrTimeoutError(OcrError):
    """Raised when recognition exceeds its time budget."""
