"""
Error taxonomy for the user directory pipeline.

Transport failures surface only after the retry budget is spent, as the
subclass matching the last attempt's failure. Normalizer failures surface
immediately as MalformedRecord.
"""

from typing import Optional


class UserDirectoryError(Exception):
    """Base class for all pipeline errors"""


class TransportError(UserDirectoryError):
    """The upstream API could not be reached successfully"""

    def __init__(self, message: str, url: Optional[str] = None, attempts: int = 0):
        super().__init__(message)
        self.url = url
        self.attempts = attempts


class RequestTimeout(TransportError):
    """No response arrived within the per-attempt timeout"""


class HttpStatusError(TransportError):
    """The upstream answered with a non-2xx status"""

    def __init__(
        self,
        status_code: int,
        url: Optional[str] = None,
        attempts: int = 0,
    ):
        super().__init__(f"HTTP {status_code} for {url}", url=url, attempts=attempts)
        self.status_code = status_code


class NetworkUnavailable(TransportError):
    """Connection-level failure (DNS, refused, reset)"""


class MalformedRecord(UserDirectoryError):
    """A raw record is missing a required field or has the wrong shape"""

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"record {index}: {message}"
        super().__init__(message)
        self.index = index
