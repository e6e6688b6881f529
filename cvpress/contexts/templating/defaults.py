"""
Default values for CVPRESS template rendering.

Provides shared defaults used by:
- data_structures.py (fallbacks for absent template fields)
- spacing.py (layout-keyed spacing table)
- style_compiler.py (fixed typography and chip treatment)
"""

from typing import Dict

DEFAULT_LAYOUT = "standard"
SIDEBAR_LAYOUT = "sidebar"
DEFAULT_FONT_FAMILY = "Arial, sans-serif"

# Spacing defaults keyed by layout (pixels)
DEFAULT_SPACING: Dict[str, Dict[str, int]] = {
    "standard": {"section_margin": 20, "item_margin": 10},
    "compact": {"section_margin": 15, "item_margin": 5},
    "spacious": {"section_margin": 25, "item_margin": 15},
}

# Fixed heading sizes (pixels)
HEADING_SIZES = {"h1": 24, "h2": 18, "h3": 16}

# Vertical rhythm as multiples of item_margin
MARGIN_MULTIPLIERS = {
    "h1_bottom": 2,
    "h2": 1,
    "h2_rule": 0.5,
    "h3": 0.5,
    "paragraph": 1,
    "list_item": 0.5,
}

ACCENT_BAR_HEIGHT = 6  # px, primary color

# Hex alpha suffixes appended to the accent color for keyword chips
ACCENT_FILL_ALPHA = "20"  # ~12% opacity
ACCENT_BORDER_ALPHA = "40"  # ~25% opacity

KEY_SKILLS_HEADING = "Key Skills"
DOCUMENT_TITLE = "Resume"
