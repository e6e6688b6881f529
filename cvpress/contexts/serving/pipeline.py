"""
PDF Generation Pipeline

Validates an inbound generation payload and runs it through composition and
rendering: payload -> GenerationRequest -> HTML document -> PDF bytes.
"""

import os
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from werkzeug.utils import secure_filename

from cvpress.contexts.rendering import render_to_pdf
from cvpress.contexts.serving.logger import (
    _log_debug,
    log_generation_failure,
    log_generation_result,
    log_generation_start,
)
from cvpress.contexts.templating import ResumeData, Template, ValidationError, compose_document
from cvpress.utils.pdf_processing import page_count
from cvpress.utils.timestamp import now

load_dotenv()

TEMP_PATH = Path(os.getenv("TEMP_PATH", "temp"))
KEEP_HTML_ARTIFACTS = os.getenv("KEEP_HTML_ARTIFACTS", "false").lower() == "true"

REQUIRED_FIELDS = ("resumeData", "templateId")


@dataclass
class GenerationRequest:
    """
    A validated PDF generation request.

    Attributes:
        resume_data: Body content and keywords
        template: Template descriptor (None when the payload carried none)
        template_id: Caller-supplied identifier, used for logging only
    """

    resume_data: ResumeData
    template: Optional[Template]
    template_id: str

    @classmethod
    def from_payload(cls, payload: Any) -> "GenerationRequest":
        """
        Build a request from a decoded JSON payload.

        Only the presence of resumeData and templateId is checked here; the
        template's nested fields are checked during composition.

        Raises:
            ValidationError: If the payload is not an object or lacks required fields
            TemplateDataError: If the template is present but not an object
        """
        if not isinstance(payload, Mapping):
            raise ValidationError(
                "Request body must be a JSON object", missing_fields=list(REQUIRED_FIELDS)
            )

        missing = [name for name in REQUIRED_FIELDS if payload.get(name) in (None, "")]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}", missing_fields=missing
            )

        resume_payload = payload["resumeData"]
        resume_data = ResumeData.from_dict(resume_payload)
        template_payload = resume_payload.get("template")

        return cls(
            resume_data=resume_data,
            template=Template.from_dict(template_payload) if template_payload is not None else None,
            template_id=str(payload["templateId"]),
        )


@dataclass
class GenerationResult:
    """
    Result of a PDF generation.

    Attributes:
        pdf_bytes: The rendered PDF
        page_count: Number of pages (None if the PDF could not be inspected)
        render_time_s: Wall time spent composing and rendering
    """

    pdf_bytes: bytes
    page_count: Optional[int] = None
    render_time_s: float = 0.0


def _save_html_artifact(html: str, template_id: str, artifacts_dir: Path) -> Path:
    """Write composed HTML to the transient working directory for debugging."""
    artifacts_dir.mkdir(parents=True, exist_ok=True)
    name = secure_filename(template_id) or "template"
    path = artifacts_dir / f"{name}_{now()}_{uuid.uuid4().hex[:8]}.html"
    path.write_text(html, encoding="utf-8")
    return path


async def generate_pdf(
    request: GenerationRequest,
    wrap_lists: bool = False,
    keep_html: bool = KEEP_HTML_ARTIFACTS,
    artifacts_dir: Path = TEMP_PATH,
) -> GenerationResult:
    """
    Compose and render a generation request.

    Args:
        request: Validated request
        wrap_lists: Wrap list items in <ul> during transcoding
        keep_html: Save the composed HTML under artifacts_dir
        artifacts_dir: Transient working directory for HTML artifacts

    Returns:
        GenerationResult with the PDF bytes

    Raises:
        TemplateDataError: If the template lacks data needed for composition
        RenderError: If the browser fails at any stage
    """
    template_layout = request.template.layout if request.template else "<none>"
    log_generation_start(request.template_id, template_layout, len(request.resume_data.keywords))
    start_time = time.time()

    try:
        html = compose_document(request.resume_data, request.template, wrap_lists=wrap_lists)
        if keep_html:
            html_path = _save_html_artifact(html, request.template_id, artifacts_dir)
            _log_debug(f"  HTML saved to: {html_path}")

        pdf_bytes = await render_to_pdf(html)
    except Exception as e:
        log_generation_failure(request.template_id, e)
        raise

    result = GenerationResult(
        pdf_bytes=pdf_bytes,
        page_count=page_count(pdf_bytes),
        render_time_s=time.time() - start_time,
    )
    log_generation_result(result)
    return result
