"""Custom exceptions for rendering context."""

from typing import Optional

from cvpress.utils.exceptions import CvpressError


class RenderError(CvpressError):
    """
    Exception raised when any stage of HTML-to-PDF rendering fails.

    Attributes:
        message: Error description
        stage: Failing stage (launch, page, load, capture, timeout)
        original_error: The underlying browser or timeout error
    """

    def __init__(
        self,
        message: str,
        stage: str,
        original_error: Optional[BaseException] = None,
    ):
        self.stage = stage
        self.original_error = original_error

        parts = [f"[{stage}] {message}"]
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
        self.message = message
