"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_composition(template, spacing, content_length: int, keyword_count: int) -> None:
    """Log the effective settings of a document composition."""
    _log_debug(
        f"Composing document: template={template.id or '<unnamed>'} "
        f"layout={template.layout} structure={template.structure}"
    )
    _log_debug(
        f"  Spacing: section={spacing.section_margin}px item={spacing.item_margin}px "
        f"(profile={template.spacing_profile})"
    )
    _log_debug(f"  Content: {content_length} chars, {keyword_count} keywords")
