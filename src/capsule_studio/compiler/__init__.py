"""
Capsule compiler.

Assembles an AppComposition into a runnable single-page HTML document.

Usage:
    from capsule_studio.catalog import build_default_registry
    from capsule_studio.compiler import CapsuleAssembler

    assembler = CapsuleAssembler(build_default_registry())
    result = assembler.assemble(composition)
    if result.success:
        html = result.html
    else:
        print(result.error)
"""

from .assembler import CapsuleAssembler, aggregate_dependencies, assemble
from .document import build_app_component, render_document
from .layout import FALLBACK_LAYOUT_CLASS, LAYOUT_CLASSES, get_layout_class
from .naming import capitalize, component_name, rename_declaration
from .props import PropValueKind, classify_prop_value, serialize_prop, serialize_props

__all__ = [
    # Assembly
    "CapsuleAssembler",
    "assemble",
    "aggregate_dependencies",
    # Document
    "build_app_component",
    "render_document",
    # Layout
    "LAYOUT_CLASSES",
    "FALLBACK_LAYOUT_CLASS",
    "get_layout_class",
    # Naming
    "capitalize",
    "component_name",
    "rename_declaration",
    # Props
    "PropValueKind",
    "classify_prop_value",
    "serialize_prop",
    "serialize_props",
]
