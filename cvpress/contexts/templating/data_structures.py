"""
Resume and Template Data Structures

Defines data classes for the inbound resume content and the visual template
descriptor. Wire payloads use camelCase keys; each class exposes a from_dict()
constructor that reads them.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from cvpress.contexts.templating.defaults import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_LAYOUT,
    SIDEBAR_LAYOUT,
)
from cvpress.contexts.templating.exceptions import TemplateDataError, ValidationError


def _as_profile_name(value: Any, field_path: str) -> Optional[str]:
    """Validate an optional spacing profile name (None when absent)."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise TemplateDataError(
            f"Spacing profile must be a string, got {value!r}", field_path=field_path
        )
    return value


def _as_pixels(value: Any, field_path: str) -> Optional[float]:
    """Coerce a spacing value to a number (None when absent)."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise TemplateDataError("Spacing value must be numeric", field_path=field_path)
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise TemplateDataError(
            f"Spacing value must be numeric, got {value!r}",
            field_path=field_path,
            original_error=e,
        ) from e
    return int(number) if number.is_integer() else number


@dataclass
class ResumeData:
    """
    Body content and skill tags of a resume.

    Attributes:
        content: Raw markup (constrained markdown subset), may be empty
        keywords: Ordered skill tags, may be empty
    """

    content: str = ""
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeData":
        if not isinstance(data, Mapping):
            raise ValidationError("resumeData must be an object", missing_fields=["resumeData"])

        keywords = data.get("keywords") or []
        if isinstance(keywords, str) or not isinstance(keywords, (list, tuple)):
            raise ValidationError("resumeData.keywords must be a list of strings")

        return cls(
            content=data.get("content") or "",
            keywords=[str(keyword) for keyword in keywords],
        )


@dataclass
class ColorScheme:
    """
    Five named colors of a template.

    All are required for composition; missing ones are reported by
    missing_fields() and rejected by the style compiler.
    """

    primary: Optional[str] = None
    secondary: Optional[str] = None
    accent: Optional[str] = None
    background: Optional[str] = None
    text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColorScheme":
        if not isinstance(data, Mapping):
            raise TemplateDataError("Template colors must be an object", field_path="colors")
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})

    def missing_fields(self) -> List[str]:
        """Names of colors that are absent or empty, in declaration order."""
        return [f.name for f in fields(self) if not getattr(self, f.name)]

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class SpacingConfig:
    """
    Vertical spacing in pixels.

    Attributes:
        section_margin: Gap between major blocks (wire: sectionMargin)
        item_margin: Base unit for heading/paragraph rhythm (wire: itemMargin)
    """

    section_margin: Optional[float] = None
    item_margin: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SpacingConfig":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TemplateDataError("Template spacing must be an object", field_path="spacing")
        return cls(
            section_margin=_as_pixels(data.get("sectionMargin"), "spacing.sectionMargin"),
            item_margin=_as_pixels(data.get("itemMargin"), "spacing.itemMargin"),
        )


@dataclass
class Template:
    """
    Visual template descriptor.

    The single `layout` field drives two independent axes:
    - structure: "sidebar" for the sidebar layout, "linear" for everything else
    - spacing_profile: key into the default spacing table (layout unless
      spacingProfile overrides it)

    Attributes:
        id: Template identifier
        name: Descriptive name (not used in rendering)
        colors: Color scheme (None when absent from the payload)
        font_family: CSS font-family value
        spacing: User spacing overrides
        layout: standard | compact | spacious | sidebar (free text accepted)
        spacing_profile_override: Explicit spacing profile (wire: spacingProfile)
    """

    id: str = ""
    name: str = ""
    colors: Optional[ColorScheme] = None
    font_family: str = DEFAULT_FONT_FAMILY
    spacing: SpacingConfig = field(default_factory=SpacingConfig)
    layout: str = DEFAULT_LAYOUT
    spacing_profile_override: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Template":
        if not isinstance(data, Mapping):
            raise TemplateDataError("Template must be an object", field_path="template")

        colors = data.get("colors")
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            colors=ColorScheme.from_dict(colors) if colors is not None else None,
            font_family=data.get("fontFamily") or DEFAULT_FONT_FAMILY,
            spacing=SpacingConfig.from_dict(data.get("spacing")),
            layout=str(data.get("layout") or DEFAULT_LAYOUT),
            spacing_profile_override=_as_profile_name(data.get("spacingProfile"), "spacingProfile"),
        )

    @property
    def structure(self) -> str:
        return "sidebar" if self.layout == SIDEBAR_LAYOUT else "linear"

    @property
    def is_sidebar(self) -> bool:
        return self.structure == "sidebar"

    @property
    def spacing_profile(self) -> str:
        return self.spacing_profile_override or self.layout
