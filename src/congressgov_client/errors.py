from typing import Any, Optional


class CongressAPIError(Exception):
    """Base class for every failure raised by the client."""


class MissingCredential(CongressAPIError, ValueError):
    """No API key was passed and none could be found in the environment."""


class UrlConstructionError(CongressAPIError, ValueError):
    """An endpoint descriptor or parameter bundle cannot be turned into a URL."""


class TransportError(CongressAPIError):
    """
    The request never produced a usable body: a network failure or a
    non-success HTTP status.
    """

    def __init__(self, reason: str, status_code: Optional[int] = None, url: Optional[str] = None):
        self.reason = reason
        self.status_code = status_code
        self.url = url
        msg = reason if status_code is None else f"HTTP {status_code}: {reason}"
        super().__init__(msg)


class MalformedBody(CongressAPIError):
    """The response body is not a JSON object."""

    def __init__(self, reason: str, body: str = "", url: Optional[str] = None):
        self.reason = reason
        self.body = body
        self.url = url
        super().__init__(f"{reason} (body starts with {body[:80]!r})")


class ShapeMismatch(CongressAPIError):
    """
    A structural response could not be materialized into the requested shape.

    ``structural`` holds the response that failed, so callers can still
    inspect or render it.
    """

    def __init__(
        self,
        shape: str,
        path: str,
        expected: str,
        actual: str,
        structural: Any = None,
    ):
        self.shape = shape
        self.path = path
        self.expected = expected
        self.actual = actual
        self.structural = structural
        super().__init__(f"{shape}: field {path} expected {expected}, got {actual}")
