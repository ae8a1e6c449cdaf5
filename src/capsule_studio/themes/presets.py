"""
Theme presets.

Each preset is a complete ThemeConfig. Variants other than the default share
its typography and spacing and only override what differs.
"""

from __future__ import annotations

import logging

from capsule_studio.specs.theme import FontFamily, ThemeColors, ThemeConfig, ThemeTypography

logger = logging.getLogger(__name__)

# =============================================================================
# Default Theme (Blue & Purple)
# =============================================================================

DEFAULT_THEME = ThemeConfig(
    name="Default",
    colors=ThemeColors(
        primary="#3B82F6",
        secondary="#8B5CF6",
        accent="#EC4899",
        neutral="#6B7280",
        success="#10B981",
        warning="#F59E0B",
        error="#EF4444",
        info="#3B82F6",
    ),
    typography=ThemeTypography(
        font_family=FontFamily(
            sans="Inter, system-ui, -apple-system, sans-serif",
            serif="Georgia, serif",
            mono="Menlo, Monaco, monospace",
        ),
        font_size={
            "xs": "0.75rem",
            "sm": "0.875rem",
            "base": "1rem",
            "lg": "1.125rem",
            "xl": "1.25rem",
            "2xl": "1.5rem",
            "3xl": "1.875rem",
            "4xl": "2.25rem",
        },
        font_weight={
            "normal": 400,
            "medium": 500,
            "semibold": 600,
            "bold": 700,
        },
    ),
    spacing={
        "xs": "0.25rem",
        "sm": "0.5rem",
        "md": "1rem",
        "lg": "1.5rem",
        "xl": "2rem",
        "2xl": "3rem",
        "3xl": "4rem",
        "4xl": "6rem",
    },
    border_radius={
        "none": "0",
        "sm": "0.125rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "xl": "0.75rem",
        "2xl": "1rem",
        "full": "9999px",
    },
    shadows={
        "sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
        "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1)",
        "lg": "0 10px 15px -3px rgba(0, 0, 0, 0.1)",
        "xl": "0 20px 25px -5px rgba(0, 0, 0, 0.1)",
        "2xl": "0 25px 50px -12px rgba(0, 0, 0, 0.25)",
        "none": "none",
    },
)

# =============================================================================
# Dark Theme
# =============================================================================

DARK_THEME = DEFAULT_THEME.model_copy(
    update={
        "name": "Dark",
        "colors": ThemeColors(
            primary="#60A5FA",
            secondary="#A78BFA",
            accent="#F472B6",
            neutral="#9CA3AF",
            success="#34D399",
            warning="#FBBF24",
            error="#F87171",
            info="#60A5FA",
        ),
        # Light shadows read better on dark backgrounds
        "shadows": {
            "sm": "0 1px 2px 0 rgba(255, 255, 255, 0.05)",
            "md": "0 4px 6px -1px rgba(255, 255, 255, 0.1)",
            "lg": "0 10px 15px -3px rgba(255, 255, 255, 0.1)",
            "xl": "0 20px 25px -5px rgba(255, 255, 255, 0.1)",
            "2xl": "0 25px 50px -12px rgba(255, 255, 255, 0.25)",
            "none": "none",
        },
    }
)

# =============================================================================
# Ocean Theme (Sky Blue, Cyan, Teal)
# =============================================================================

OCEAN_THEME = DEFAULT_THEME.model_copy(
    update={
        "name": "Ocean",
        "colors": ThemeColors(
            primary="#0EA5E9",
            secondary="#06B6D4",
            accent="#14B8A6",
            neutral="#64748B",
            success="#22C55E",
            warning="#F59E0B",
            error="#EF4444",
            info="#0EA5E9",
        ),
    }
)

# =============================================================================
# Sunset Theme (Orange, Pink, Yellow)
# =============================================================================

SUNSET_THEME = DEFAULT_THEME.model_copy(
    update={
        "name": "Sunset",
        "colors": ThemeColors(
            primary="#F97316",
            secondary="#EC4899",
            accent="#FBBF24",
            neutral="#78716C",
            success="#84CC16",
            warning="#F59E0B",
            error="#DC2626",
            info="#F97316",
        ),
    }
)

# =============================================================================
# Forest Theme (Greens and Earth Tones)
# =============================================================================

FOREST_THEME = DEFAULT_THEME.model_copy(
    update={
        "name": "Forest",
        "colors": ThemeColors(
            primary="#22C55E",
            secondary="#84CC16",
            accent="#10B981",
            neutral="#78716C",
            success="#22C55E",
            warning="#F59E0B",
            error="#DC2626",
            info="#14B8A6",
        ),
    }
)

# =============================================================================
# Minimal Theme (Grays and Blacks)
# =============================================================================

MINIMAL_THEME = DEFAULT_THEME.model_copy(
    update={
        "name": "Minimal",
        "colors": ThemeColors(
            primary="#18181B",
            secondary="#3F3F46",
            accent="#71717A",
            neutral="#A1A1AA",
            success="#10B981",
            warning="#F59E0B",
            error="#EF4444",
            info="#6366F1",
        ),
        "border_radius": {
            "none": "0",
            "sm": "0.125rem",
            "md": "0.25rem",
            "lg": "0.375rem",
            "xl": "0.5rem",
            "2xl": "0.75rem",
            "full": "9999px",
        },
    }
)

# =============================================================================
# Theme Registry
# =============================================================================

_THEME_PRESETS: dict[str, ThemeConfig] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
    "ocean": OCEAN_THEME,
    "sunset": SUNSET_THEME,
    "forest": FOREST_THEME,
    "minimal": MINIMAL_THEME,
}


def get_theme_preset(name: str) -> ThemeConfig | None:
    """
    Get a theme preset by name.

    Args:
        name: Theme preset name ("default", "dark", "ocean", ...)

    Returns:
        ThemeConfig if found, None otherwise
    """
    return _THEME_PRESETS.get(name)


def get_theme(name: str) -> ThemeConfig:
    """Get a theme preset by name, falling back to the default theme."""
    theme = get_theme_preset(name)
    if theme is None:
        logger.warning("Unknown theme preset %r, using default", name)
        return DEFAULT_THEME
    return theme


def list_theme_presets() -> list[str]:
    """
    List available theme preset names.

    Returns:
        List of preset names
    """
    return list(_THEME_PRESETS.keys())
