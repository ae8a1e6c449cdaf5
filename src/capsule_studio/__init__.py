"""
Capsule Studio

Catalog of pre-written UI component snippets ("capsules") and an assembler
that composes selected capsules into one runnable HTML page.

This package provides:
- Specs: Capsule, composition, and theme types
- Catalog: Capsule registry, built-in capsules, and app templates
- Compiler: Composition assembly into source and HTML
- Themes: Preset themes and CSS/Tailwind/JSON exports
"""

from capsule_studio._version import __version__
from capsule_studio.catalog import CapsuleRegistry, build_default_registry
from capsule_studio.compiler import CapsuleAssembler, assemble
from capsule_studio.config import AssemblerSettings, load_assembler_settings
from capsule_studio.specs import (
    AppComposition,
    CapsuleDefinition,
    CapsuleInstance,
    CompilationResult,
)

__all__ = [
    "__version__",
    "AppComposition",
    "AssemblerSettings",
    "CapsuleAssembler",
    "CapsuleDefinition",
    "CapsuleInstance",
    "CapsuleRegistry",
    "CompilationResult",
    "assemble",
    "build_default_registry",
    "load_assembler_settings",
]
