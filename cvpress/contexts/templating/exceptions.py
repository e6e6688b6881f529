"""Custom exceptions for templating context with template references."""

from typing import List, Optional

from cvpress.utils.exceptions import CvpressError


class TemplateDataError(CvpressError):
    """
    Exception raised when a template descriptor lacks data needed for composition.

    Attributes:
        message: Error description
        field_path: Dotted path of the offending field (e.g., 'colors.accent')
        template_id: Identifier of the template being composed
        original_error: The underlying Jinja2 or lookup error, if any
    """

    def __init__(
        self,
        message: str,
        field_path: Optional[str] = None,
        template_id: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.field_path = field_path
        self.template_id = template_id
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if field_path:
            parts.append(f"Field: {field_path}")
        if template_id:
            parts.append(f"Template: {template_id}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
        self.message = message


class ValidationError(CvpressError, ValueError):
    """
    Exception raised when a generation payload is missing required fields.

    Raised before any pipeline stage runs.

    Attributes:
        message: Error description
        missing_fields: Names of the absent top-level fields
    """

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        self.missing_fields = missing_fields or []
        super().__init__(message)
