"""
Capsule specification types.

This module exports all capsule, composition, and theme types.
"""

from capsule_studio.specs.capsule import (
    CapsuleCategory,
    CapsuleDefinition,
    CapsuleProp,
    PropType,
)
from capsule_studio.specs.composition import (
    AppComposition,
    CapsuleInstance,
    CompilationResult,
    LayoutKind,
)
from capsule_studio.specs.theme import (
    FontFamily,
    ThemeColors,
    ThemeConfig,
    ThemeTypography,
)

__all__ = [
    # Capsule types
    "CapsuleCategory",
    "CapsuleDefinition",
    "CapsuleProp",
    "PropType",
    # Composition types
    "AppComposition",
    "CapsuleInstance",
    "CompilationResult",
    "LayoutKind",
    # Theme types
    "FontFamily",
    "ThemeColors",
    "ThemeConfig",
    "ThemeTypography",
]
