"""
Templating Registries

Registry for loading and caching the Jinja2 templates used to build
stylesheets and HTML documents.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
HTML_TEMPLATES_PATH = Path(
    os.getenv("HTML_TEMPLATES_PATH", Path(__file__).resolve().parent / "template")
)


def format_pixels(value: Union[int, float]) -> str:
    """
    Format a pixel quantity without a trailing ".0".

    Examples:
        format_pixels(10)   # "10px"
        format_pixels(2.5)  # "2.5px"
        format_pixels(5.0)  # "5px"
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}px"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored in cvpress/contexts/templating/template/{name}.jinja.
    Autoescaping is disabled: resume content and keywords are interpolated raw,
    and StrictUndefined turns any missing template variable into an error.
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding *.jinja files. Defaults to
                            HTML_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = HTML_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["px"] = format_pixels

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'stylesheet.css')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.jinja"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a named template."""
        return self.templates_path / f"{name}.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache


_default_registry: Optional[TemplateRegistry] = None


def get_default_registry() -> TemplateRegistry:
    """Shared registry for the packaged templates."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry
