"""
Custom theme resolution.

Builds a custom theme by overlaying color overrides on a base preset, and
maps hard-coded Tailwind color classes onto theme color names.
"""

from __future__ import annotations

import re
from typing import Any

from capsule_studio.specs.theme import ThemeColors, ThemeConfig

from .presets import DEFAULT_THEME

# (pattern, replacement), applied in order
_CLASS_REPLACEMENTS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"bg-blue-\d+"), "bg-primary"),
    (re.compile(r"text-blue-\d+"), "text-primary"),
    (re.compile(r"border-blue-\d+"), "border-primary"),
    (re.compile(r"bg-purple-\d+"), "bg-secondary"),
    (re.compile(r"text-purple-\d+"), "text-secondary"),
    (re.compile(r"border-purple-\d+"), "border-secondary"),
]


def create_custom_theme(
    name: str,
    custom_colors: dict[str, Any],
    base_theme: ThemeConfig = DEFAULT_THEME,
) -> ThemeConfig:
    """
    Create a theme from a base theme with color overrides.

    Args:
        name: Name of the new theme
        custom_colors: Partial color mapping (e.g. {"primary": "#FF6B6B"})
        base_theme: Theme providing every other token

    Returns:
        New ThemeConfig; the base theme is not modified

    Raises:
        pydantic.ValidationError: If an override names an unknown color
    """
    colors = ThemeColors.model_validate({**base_theme.colors.model_dump(), **custom_colors})
    return base_theme.model_copy(update={"name": name, "colors": colors})


def apply_theme_to_classes(base_classes: str, theme: ThemeConfig) -> str:
    """
    Replace blue/purple Tailwind color classes with theme color classes.

    The mapping is fixed; ``theme`` only selects which palette the
    primary/secondary classes resolve to via the exported Tailwind config.
    """
    classes = base_classes
    for pattern, replacement in _CLASS_REPLACEMENTS:
        classes = pattern.sub(replacement, classes)
    return classes
