"""
Document Composition

Assembles the final self-contained HTML document from resume data and a
template descriptor. Orchestrates the markdown transcoder, spacing resolver,
and stylesheet compiler.
"""

from typing import Optional

from jinja2 import UndefinedError

from cvpress.contexts.templating.data_structures import ResumeData, Template
from cvpress.contexts.templating.defaults import DEFAULT_SPACING, DOCUMENT_TITLE, KEY_SKILLS_HEADING
from cvpress.contexts.templating.exceptions import TemplateDataError
from cvpress.contexts.templating.logger import _log_warning, log_composition
from cvpress.contexts.templating.markdown_transcoder import transcode
from cvpress.contexts.templating.registries import TemplateRegistry, get_default_registry
from cvpress.contexts.templating.spacing import resolve_spacing
from cvpress.contexts.templating.style_compiler import compile_styles

DOCUMENT_TEMPLATE = "document.html"


def compose_document(
    resume_data: ResumeData,
    template: Template,
    wrap_lists: bool = False,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Compose a complete HTML document.

    Two mutually exclusive structures are produced, selected by template.structure:
    - sidebar: flex container with the content on the left and a "Key Skills"
      column on the right
    - linear: content followed by the "Key Skills" heading and chips

    Keywords render one chip each, in input order, without deduplication or
    escaping. Output is deterministic for identical input.

    Args:
        resume_data: Body content and keywords
        template: Template descriptor (colors required)
        wrap_lists: Wrap list items in <ul> (see markdown_transcoder.transcode)
        registry: Template registry (defaults to the packaged templates)

    Returns:
        HTML document text

    Raises:
        TemplateDataError: If the template lacks data needed for composition
    """
    if template is None:
        raise TemplateDataError("Resume data has no template", field_path="template")

    registry = registry or get_default_registry()

    if template.spacing_profile not in DEFAULT_SPACING and not template.is_sidebar:
        _log_warning(f"Unknown layout '{template.spacing_profile}', using standard spacing")

    spacing = resolve_spacing(template.spacing_profile, template.spacing)
    log_composition(template, spacing, len(resume_data.content), len(resume_data.keywords))

    stylesheet = compile_styles(template, spacing, registry=registry)

    try:
        return registry.get_template(DOCUMENT_TEMPLATE).render(
            title=DOCUMENT_TITLE,
            stylesheet=stylesheet,
            content=transcode(resume_data.content, wrap_lists=wrap_lists),
            keywords=resume_data.keywords,
            skills_heading=KEY_SKILLS_HEADING,
            sidebar=template.is_sidebar,
        )
    except UndefinedError as e:
        raise TemplateDataError(
            "Document references undefined template data",
            template_id=template.id,
            original_error=e,
        ) from e
