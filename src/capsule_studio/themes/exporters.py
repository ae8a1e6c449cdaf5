"""
Theme exporters.

Renders a ThemeConfig as CSS custom properties, a Tailwind config module,
or JSON.
"""

from __future__ import annotations

from capsule_studio.specs.theme import ThemeConfig


def export_css_variables(theme: ThemeConfig) -> str:
    """
    Generate a :root block of CSS custom properties.

    Args:
        theme: Theme to export

    Returns:
        CSS string
    """
    lines: list[str] = []

    lines.append("/* CSS Variables */")
    lines.append(f"/* Theme: {theme.name} */")
    lines.append("")
    lines.append(":root {")

    lines.append("  /* Colors */")
    for name, value in theme.colors.model_dump().items():
        lines.append(f"  --color-{name}: {value};")
    lines.append("")

    typography = theme.typography
    lines.append("  /* Typography */")
    for name, value in typography.font_family.model_dump().items():
        lines.append(f"  --font-{name}: {value};")
    lines.append("")
    for name, value in typography.font_size.items():
        lines.append(f"  --font-size-{name}: {value};")
    lines.append("")
    for name, weight in typography.font_weight.items():
        lines.append(f"  --font-weight-{name}: {weight};")
    lines.append("")

    lines.append("  /* Spacing */")
    for name, value in theme.spacing.items():
        lines.append(f"  --spacing-{name}: {value};")
    lines.append("")

    lines.append("  /* Border Radius */")
    for name, value in theme.border_radius.items():
        if name != "none":
            lines.append(f"  --radius-{name}: {value};")
    lines.append("")

    lines.append("  /* Shadows */")
    for name, value in theme.shadows.items():
        if name != "none":
            lines.append(f"  --shadow-{name}: {value};")
    lines.append("}")

    return "\n".join(lines)


def _js_key(name: str) -> str:
    """Quote object keys that are not valid JS identifiers ('2xl')."""
    return name if name.isidentifier() else f"'{name}'"


def _font_list(stack: str) -> str:
    return ", ".join(f"'{font.strip()}'" for font in stack.split(","))


def export_tailwind_config(theme: ThemeConfig) -> str:
    """
    Generate a tailwind.config.js module extending the default theme.

    Args:
        theme: Theme to export

    Returns:
        JavaScript source string
    """
    lines: list[str] = [
        "// Tailwind Config",
        f"// Theme: {theme.name}",
        "",
        "module.exports = {",
        "  theme: {",
        "    extend: {",
        "      colors: {",
    ]
    for name, value in theme.colors.model_dump().items():
        lines.append(f"        {name}: '{value}',")
    lines.append("      },")

    lines.append("      fontFamily: {")
    for name, stack in theme.typography.font_family.model_dump().items():
        lines.append(f"        {name}: [{_font_list(stack)}],")
    lines.append("      },")

    lines.append("      spacing: {")
    for name, value in theme.spacing.items():
        lines.append(f"        {_js_key(name)}: '{value}',")
    lines.append("      },")

    lines.append("      borderRadius: {")
    for name, value in theme.border_radius.items():
        if name != "none":
            lines.append(f"        {_js_key(name)}: '{value}',")
    lines.append("      },")

    lines.append("      boxShadow: {")
    for name, value in theme.shadows.items():
        if name != "none":
            lines.append(f"        {_js_key(name)}: '{value}',")
    lines.append("      },")

    lines.extend(["    },", "  },", "};"])
    return "\n".join(lines)


def export_json(theme: ThemeConfig) -> str:
    """Serialize a theme as indented JSON with camelCase keys."""
    return theme.model_dump_json(by_alias=True, indent=2)
