"""Error types raised by the WistiaDL core.

Every failure that leaves the core is one of these, so callers can show a
specific message for each case. Third-party exceptions (requests, json,
pydantic) are re-raised as one of them with the original chained.
"""

from __future__ import annotations


class WistiaDLError(Exception):
    """Base class for all WistiaDL errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class InputError(WistiaDLError):
    """Raised when no video ID can be resolved from the input text."""


class HttpError(WistiaDLError):
    """Raised when the embed request fails or returns a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code


class PayloadNotFoundError(WistiaDLError):
    """Raised when the embed page does not contain the video data call."""


class MalformedPayloadError(WistiaDLError):
    """Raised when the embedded video data cannot be parsed."""


class EmptyAssetsError(WistiaDLError):
    """Raised when the video data lists no assets."""


class NoDataError(WistiaDLError):
    """Raised when exporting an empty collection."""


class UnsupportedFormatError(WistiaDLError, ValueError):
    """Raised when an export format is not known."""


class BusyError(WistiaDLError):
    """Raised when an extraction is started while another is running."""
