"""
Serving Context

Responsibilities:
- Validates inbound generation payloads
- Runs the compose -> render pipeline per request
- Exposes the pipeline over HTTP and converts failures into JSON errors

Owns: Request lifecycle, HTTP surface, transient working directory
Never: Builds markup or drives the browser directly
"""

from cvpress.contexts.serving.pipeline import (
    GenerationRequest,
    GenerationResult,
    generate_pdf,
)

__all__ = [
    "GenerationRequest",
    "GenerationResult",
    "generate_pdf",
]
