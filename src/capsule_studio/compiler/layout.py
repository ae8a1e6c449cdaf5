"""Root container classes per composition layout."""

from __future__ import annotations

from enum import Enum

from capsule_studio.specs.composition import LayoutKind

LAYOUT_CLASSES: dict[str, str] = {
    LayoutKind.SINGLE.value: "flex flex-col items-center",
    LayoutKind.GRID.value: "grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-6",
    LayoutKind.FLEX.value: "flex flex-wrap gap-6",
}

# Used for "custom" and any unrecognized layout
FALLBACK_LAYOUT_CLASS = "space-y-6"


def get_layout_class(layout: LayoutKind | str) -> str:
    """Return the Tailwind class string for a layout name."""
    key = layout.value if isinstance(layout, Enum) else layout
    return LAYOUT_CLASSES.get(key, FALLBACK_LAYOUT_CLASS)
