"""
Capsule theme system.

Global theming applied to generated apps: preset themes, custom themes,
and exports as CSS variables, Tailwind config, or JSON.

Usage:
    from capsule_studio.themes import (
        create_custom_theme,
        export_css_variables,
        export_tailwind_config,
        get_theme,
    )

    # Get a preset theme
    theme = get_theme("ocean")

    # Export as Tailwind config
    config_js = export_tailwind_config(theme)

    # Create a custom theme and export it as CSS variables
    brand = create_custom_theme("My Brand", {"primary": "#FF6B6B"})
    css = export_css_variables(brand)
"""

from .exporters import export_css_variables, export_json, export_tailwind_config
from .presets import (
    DARK_THEME,
    DEFAULT_THEME,
    FOREST_THEME,
    MINIMAL_THEME,
    OCEAN_THEME,
    SUNSET_THEME,
    get_theme,
    get_theme_preset,
    list_theme_presets,
)
from .resolver import apply_theme_to_classes, create_custom_theme

__all__ = [
    # Presets
    "DEFAULT_THEME",
    "DARK_THEME",
    "OCEAN_THEME",
    "SUNSET_THEME",
    "FOREST_THEME",
    "MINIMAL_THEME",
    "get_theme",
    "get_theme_preset",
    "list_theme_presets",
    # Export
    "export_css_variables",
    "export_tailwind_config",
    "export_json",
    # Custom themes
    "create_custom_theme",
    "apply_theme_to_classes",
]
