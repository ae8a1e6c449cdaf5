"""
Capsule catalog.

Usage:
    from capsule_studio.catalog import build_default_registry

    registry = build_default_registry()
    button = registry.resolve("button")
    layouts = registry.list_capsules("layout")
"""

from .advanced_ui import ADVANCED_UI_CAPSULES
from .app_templates import APP_TEMPLATES, get_app_template, list_app_templates
from .basic import BASIC_CAPSULES
from .dataviz import DATAVIZ_CAPSULES
from .registry import CapsuleRegistry


def build_default_registry(*, strict: bool = True) -> CapsuleRegistry:
    """Build a fresh registry holding every built-in capsule sublist."""
    return CapsuleRegistry.from_sources(
        BASIC_CAPSULES,
        DATAVIZ_CAPSULES,
        ADVANCED_UI_CAPSULES,
        strict=strict,
    )


__all__ = [
    # Registry
    "CapsuleRegistry",
    "build_default_registry",
    # Sublists
    "BASIC_CAPSULES",
    "DATAVIZ_CAPSULES",
    "ADVANCED_UI_CAPSULES",
    # App templates
    "APP_TEMPLATES",
    "get_app_template",
    "list_app_templates",
]
