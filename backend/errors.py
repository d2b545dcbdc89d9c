"""Error types raised while analyzing a page."""


class AnalysisError(Exception):
    """Base class for every failure the analyze pipeline reports."""


class ValidationError(AnalysisError):
    """The submitted URL is missing or malformed. Maps to HTTP 400."""


class FetchError(AnalysisError):
    """The page could not be retrieved: timeout, DNS, refused, non-2xx."""

    def __init__(self, message: str, url: str = "", status_code: int = 0) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(AnalysisError):
    """The markup could not be turned into a tree.

    The document builder logs this and substitutes an empty document.
    """
