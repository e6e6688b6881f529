"""
Spacing Resolution

Merges the layout-keyed default spacing table with user overrides.

Examples:
    >>> resolve_spacing("compact", SpacingConfig())
    SpacingConfig(section_margin=15, item_margin=5)

    >>> resolve_spacing("compact", SpacingConfig(item_margin=8))
    SpacingConfig(section_margin=15, item_margin=8)
"""

from typing import Optional

from cvpress.contexts.templating.data_structures import SpacingConfig
from cvpress.contexts.templating.defaults import DEFAULT_LAYOUT, DEFAULT_SPACING


def get_default_spacing(layout: Optional[str]) -> SpacingConfig:
    """Default spacing for a layout key; unknown or missing keys get standard."""
    defaults = DEFAULT_SPACING.get(layout or DEFAULT_LAYOUT, DEFAULT_SPACING[DEFAULT_LAYOUT])
    return SpacingConfig(**defaults)


def resolve_spacing(layout: Optional[str], overrides: Optional[SpacingConfig] = None) -> SpacingConfig:
    """
    Compute effective spacing for a layout.

    Each field is resolved independently: a truthy override wins, anything
    else (absent, zero, empty) falls back to the layout default.

    Args:
        layout: Spacing profile key (standard, compact, spacious; others map to standard)
        overrides: User-supplied spacing, possibly partial

    Returns:
        Fully populated SpacingConfig
    """
    defaults = get_default_spacing(layout)
    if overrides is None:
        return defaults

    return SpacingConfig(
        section_margin=overrides.section_margin or defaults.section_margin,
        item_margin=overrides.item_margin or defaults.item_margin,
    )
