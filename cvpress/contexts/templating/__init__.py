"""
Templating Context

Responsibilities:
- Represents resume content and visual template descriptors
- Transcodes the constrained markdown subset into HTML fragments
- Resolves layout spacing and compiles the stylesheet
- Composes the self-contained HTML document

Owns: HTML/CSS generation, template-to-style mapping, layout variants
Never: Launches browsers or produces PDF bytes
"""

from cvpress.contexts.templating.composer import compose_document
from cvpress.contexts.templating.data_structures import (
    ColorScheme,
    ResumeData,
    SpacingConfig,
    Template,
)
from cvpress.contexts.templating.exceptions import TemplateDataError, ValidationError
from cvpress.contexts.templating.markdown_transcoder import transcode
from cvpress.contexts.templating.spacing import resolve_spacing
from cvpress.contexts.templating.style_compiler import compile_styles

__all__ = [
    # Pipeline stages
    "transcode",
    "resolve_spacing",
    "compile_styles",
    "compose_document",
    # Data structure classes
    "ResumeData",
    "ColorScheme",
    "SpacingConfig",
    "Template",
    # Errors
    "TemplateDataError",
    "ValidationError",
]
