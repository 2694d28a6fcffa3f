"""Error taxonomy for the documentation browser."""


class DocsBrowserError(Exception):
    """Base class for all documentation browser errors."""


class NotFoundError(DocsBrowserError):
    """The requested document or category does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Document not found: {path!r}")
        self.path = path


class ReadFailure(DocsBrowserError):
    """Filesystem or permission error while walking or reading the corpus."""


class RenderFailure(DocsBrowserError):
    """Markdown conversion failed."""


class NetworkFailure(DocsBrowserError):
    """A client-side request failed or returned a non-2xx status."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
