"""Base exception shared by all CVPRESS contexts."""


class CvpressError(Exception):
    """
    Root of the CVPRESS exception hierarchy.

    Request boundaries (HTTP route, CLI commands) catch this type and turn it
    into a structured failure instead of letting it escape.

    Attributes:
        message: Human-readable description without the composed context lines
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
