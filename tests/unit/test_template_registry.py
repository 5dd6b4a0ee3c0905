"""Unit tests for TemplateRegistry class."""

import pytest
from pathlib import Path
from jinja2 import StrictUndefined, TemplateNotFound, UndefinedError

from resumetex.contexts.templating.latex_generator import ResumeLaTeXGenerator
from resumetex.contexts.templating.registries import DEFAULT_TEMPLATES_PATH, TemplateRegistry

SECTION_TYPES = ["heading", "education", "experience", "projects", "achievements", "skills"]


@pytest.fixture
def registry():
    """Bundled-template registry with the generator's filters registered."""
    return ResumeLaTeXGenerator(TemplateRegistry(DEFAULT_TEMPLATES_PATH)).template_registry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry(DEFAULT_TEMPLATES_PATH)
    assert registry.templates_path.exists()
    assert registry._cache == {}
    assert registry.env.undefined is StrictUndefined


@pytest.mark.unit
@pytest.mark.parametrize("type_name", SECTION_TYPES)
def test_every_section_template_loads(registry, type_name):
    """Test loading each bundled section template."""
    template = registry.get_template(type_name)

    assert template is not None
    assert registry.is_cached(type_name)


@pytest.mark.unit
@pytest.mark.parametrize("name", ["preamble", "document"])
def test_structure_templates_load(registry, name):
    assert registry.get_structure_template(name) is not None


@pytest.mark.unit
def test_template_caching(registry):
    """Test that templates are cached after first load."""
    # First load
    template1 = registry.get_template("education")
    assert registry.is_cached("education")

    # Second load should return same object from cache
    template2 = registry.get_template("education")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry(DEFAULT_TEMPLATES_PATH)

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_type")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry(DEFAULT_TEMPLATES_PATH)
    path = registry.get_template_path("projects")

    assert isinstance(path, Path)
    assert path.name == "template.tex.jinja"
    assert path.parent.name == "projects"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache(registry):
    """Test cache clearing."""
    # Load template
    registry.get_template("skills")
    assert len(registry._cache) == 1

    # Clear cache
    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_custom_delimiters(tmp_path):
    """Braces pass through untouched; <<< >>> and <%% %%> are Jinja syntax."""
    type_dir = tmp_path / "types" / "sample"
    type_dir.mkdir(parents=True)
    (type_dir / "template.tex.jinja").write_text(
        "\\textbf{<<< value >>>}\n<%% if flag %%>\n{on}\n<%% endif %%>\n"
    )

    registry = TemplateRegistry(tmp_path)
    rendered = registry.get_template("sample").render(value="x", flag=True)

    assert rendered == "\\textbf{x}\n{on}\n"


@pytest.mark.unit
def test_missing_variable_raises(tmp_path):
    """StrictUndefined surfaces missing context instead of rendering blanks."""
    type_dir = tmp_path / "types" / "sample"
    type_dir.mkdir(parents=True)
    (type_dir / "template.tex.jinja").write_text("<<< missing >>>")

    registry = TemplateRegistry(tmp_path)

    with pytest.raises(UndefinedError):
        registry.get_template("sample").render()
