"""
Stylesheet Compilation

Maps a template descriptor and resolved spacing onto the document stylesheet.
"""

from typing import Any, Dict, Optional

from jinja2 import UndefinedError

from cvpress.contexts.templating.data_structures import SpacingConfig, Template
from cvpress.contexts.templating.defaults import (
    ACCENT_BAR_HEIGHT,
    ACCENT_BORDER_ALPHA,
    ACCENT_FILL_ALPHA,
    HEADING_SIZES,
    MARGIN_MULTIPLIERS,
)
from cvpress.contexts.templating.exceptions import TemplateDataError
from cvpress.contexts.templating.registries import TemplateRegistry, get_default_registry

STYLESHEET_TEMPLATE = "stylesheet.css"


def check_colors(template: Template) -> None:
    """
    Reject templates whose color scheme is absent or incomplete.

    Raises:
        TemplateDataError: Naming the first missing color
    """
    if template.colors is None:
        raise TemplateDataError(
            "Template is missing its color scheme", field_path="colors", template_id=template.id
        )

    missing = template.colors.missing_fields()
    if missing:
        raise TemplateDataError(
            f"Template color scheme is missing: {', '.join(missing)}",
            field_path=f"colors.{missing[0]}",
            template_id=template.id,
        )


def _rhythm(item_margin: float) -> Dict[str, float]:
    """Heading/paragraph/list margins derived from item_margin."""
    return {name: item_margin * factor for name, factor in MARGIN_MULTIPLIERS.items()}


def build_style_context(template: Template, spacing: SpacingConfig) -> Dict[str, Any]:
    """Variables consumed by the stylesheet template."""
    accent = template.colors.accent
    return {
        "font_family": template.font_family,
        "colors": template.colors.to_dict(),
        "spacing": {
            "section_margin": spacing.section_margin,
            "item_margin": spacing.item_margin,
        },
        "heading_sizes": HEADING_SIZES,
        "margins": _rhythm(spacing.item_margin),
        "accent_bar_height": ACCENT_BAR_HEIGHT,
        "accent_fill": f"{accent}{ACCENT_FILL_ALPHA}",
        "accent_border": f"{accent}{ACCENT_BORDER_ALPHA}",
        "sidebar": template.is_sidebar,
    }


def compile_styles(
    template: Template,
    spacing: SpacingConfig,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Compile the stylesheet for a template.

    The sidebar ruleset (two flex columns with a divider) is appended only for
    the sidebar structure; compact and spacious layouts change numbers only.

    Args:
        template: Template descriptor with a complete color scheme
        spacing: Fully resolved spacing (see resolve_spacing)
        registry: Template registry (defaults to the packaged templates)

    Returns:
        Stylesheet text

    Raises:
        TemplateDataError: If colors are missing or a template variable is undefined
    """
    check_colors(template)
    registry = registry or get_default_registry()

    try:
        return registry.get_template(STYLESHEET_TEMPLATE).render(
            build_style_context(template, spacing)
        )
    except UndefinedError as e:
        raise TemplateDataError(
            "Stylesheet references undefined template data",
            template_id=template.id,
            original_error=e,
        ) from e
