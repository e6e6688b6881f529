"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from cvpress.contexts.templating.registries import HTML_TEMPLATES_PATH, TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    registry = TemplateRegistry()
    assert registry.templates_path == HTML_TEMPLATES_PATH
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("name", ["stylesheet.css", "document.html"])
def test_packaged_templates_load(name):
    registry = TemplateRegistry()
    assert registry.get_template(name) is not None
    assert registry.is_cached(name)


@pytest.mark.unit
def test_template_caching():
    """Second load returns the cached object."""
    registry = TemplateRegistry()
    first = registry.get_template("document.html")
    assert registry.get_template("document.html") is first


@pytest.mark.unit
def test_get_template_not_found():
    with pytest.raises(TemplateNotFound):
        TemplateRegistry().get_template("nonexistent")


@pytest.mark.unit
def test_get_template_path():
    path = TemplateRegistry().get_template_path("stylesheet.css")

    assert isinstance(path, Path)
    assert path.name == "stylesheet.css.jinja"


@pytest.mark.unit
def test_clear_cache():
    registry = TemplateRegistry()
    registry.get_template("stylesheet.css")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    (tmp_path / "greeting.jinja").write_text("Hello {{ name }} at {{ size | px }}")
    registry = TemplateRegistry(tmp_path)

    assert registry.get_template("greeting").render(name="<b>Ada</b>", size=2.0) == "Hello <b>Ada</b> at 2px"


@pytest.mark.unit
def test_strict_undefined(tmp_path):
    """Missing variables raise instead of rendering empty."""
    (tmp_path / "strict.jinja").write_text("{{ missing }}")
    with pytest.raises(UndefinedError):
        TemplateRegistry(tmp_path).get_template("strict").render()
