"""
Root component generation and HTML document rendering.

The root component places one call site per capsule instance inside the
layout container. The document embeds the whole bundle in a single inline
script after the runtime scripts; the bundle is one flat concatenation
sharing global scope.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from capsule_studio.compiler.layout import get_layout_class
from capsule_studio.compiler.naming import component_name
from capsule_studio.compiler.props import serialize_props
from capsule_studio.config import AssemblerSettings
from capsule_studio.specs.capsule import CapsuleDefinition
from capsule_studio.specs.composition import AppComposition, CapsuleInstance
from capsule_studio.themes import export_css_variables, get_theme

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

DOCUMENT_TEMPLATE = "document.html"
MOUNT_ID = "root"
ROOT_COMPONENT = "App"


def create_jinja_env() -> Environment:
    """Create the Jinja2 environment for document templates."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


_env: Environment | None = None


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment, creating it on first use."""
    global _env
    if _env is None:
        _env = create_jinja_env()
    return _env


def _js_string(value: str) -> str:
    """Quote text as a JS string literal for use inside a JSX expression."""
    return json.dumps(value, ensure_ascii=False)


def build_app_component(
    composition: AppComposition,
    resolved: Sequence[tuple[CapsuleDefinition, CapsuleInstance]],
) -> str:
    """
    Generate the root component source.

    Args:
        composition: Supplies the heading, subheading, and layout
        resolved: (definition, instance) pairs in composition order

    Returns:
        Source of a ``function App()`` declaration
    """
    layout_class = get_layout_class(composition.layout)

    call_sites: list[str] = []
    for definition, instance in resolved:
        name = component_name(definition.id, instance.instance_id)
        props = serialize_props(instance.props)
        call_sites.append(f"    <{name} {props} />" if props else f"    <{name} />")
    instances_code = "\n".join(call_sites)

    heading = _js_string(composition.name)
    subheading = _js_string(composition.description)

    return f"""
function {ROOT_COMPONENT}() {{
  return (
    <div className="min-h-screen bg-gray-50 p-8">
      <div className="max-w-7xl mx-auto">
        <h1 className="text-4xl font-bold text-gray-900 mb-2">{{{heading}}}</h1>
        <p className="text-gray-600 mb-8">{{{subheading}}}</p>

        <div className="{layout_class}">
{instances_code}
        </div>
      </div>
    </div>
  )
}}"""


def render_document(bundle: str, title: str, settings: AssemblerSettings) -> str:
    """
    Wrap a source bundle in a standalone HTML document.

    Args:
        bundle: Concatenated capsule definitions and root component
        title: Page title (HTML-escaped)
        settings: Runtime scripts, bundle script type, and theme

    Returns:
        Complete HTML document
    """
    theme_css = ""
    if settings.theme:
        theme_css = export_css_variables(get_theme(settings.theme))

    template = get_jinja_env().get_template(DOCUMENT_TEMPLATE)
    return template.render(
        title=title,
        scripts=settings.scripts,
        script_type=settings.script_type,
        theme_css=Markup(theme_css),
        mount_id=MOUNT_ID,
        bundle=Markup(bundle),
        root_component=ROOT_COMPONENT,
    )
