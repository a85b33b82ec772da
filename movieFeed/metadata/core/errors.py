"""metadata.core.errors
Failure taxonomy for catalog fetches.

The catalog controller treats every subclass the same way (the page is
dropped from its batch); the split exists for logging and for callers that
want to tell a bad token from a flaky network.
"""

from __future__ import annotations


class FetchError(Exception):
    """Base class for anything that stops a page or search from loading."""


class InvalidRequest(FetchError):
    """The request could not be built (bad page number, blank query …)."""


class TransportFailure(FetchError):
    """Connection, DNS, TLS or timeout error raised by the HTTP layer."""

    def __init__(self, underlying: BaseException):
        super().__init__(f"request failed: {underlying}")
        self.underlying = underlying


class BadStatus(FetchError):
    """Server answered with a non-2xx status code."""

    def __init__(self, code: int, body: str | None = None):
        super().__init__(f"bad status {code}")
        self.code = code
        self.body = body


class DecodeFailure(FetchError):
    """Body was not JSON or did not have the expected shape."""
