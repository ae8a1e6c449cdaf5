"""
Capsule assembler.

Turns one AppComposition into a CompilationResult:

1. Check instance ids are unique (when strict)
2. Resolve every capsule id, all or nothing
3. Rename each definition's declaration per instance
4. Build the root component with serialized props and layout class
5. Wrap the bundle in an HTML document
6. Aggregate dependencies

The assembler holds no mutable state; one instance can serve concurrent
callers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from capsule_studio.catalog import CapsuleRegistry, build_default_registry
from capsule_studio.compiler.document import build_app_component, render_document
from capsule_studio.compiler.naming import rename_declaration
from capsule_studio.config import AssemblerSettings
from capsule_studio.errors import DuplicateInstanceError
from capsule_studio.specs.capsule import CapsuleDefinition
from capsule_studio.specs.composition import (
    AppComposition,
    CapsuleInstance,
    CompilationResult,
)

logger = logging.getLogger(__name__)


def _check_instance_ids(composition: AppComposition) -> None:
    """Raise DuplicateInstanceError on the first repeated instance id."""
    seen: set[str] = set()
    for instance in composition.capsules:
        if instance.instance_id in seen:
            raise DuplicateInstanceError(instance.instance_id)
        seen.add(instance.instance_id)


def aggregate_dependencies(definitions: Sequence[CapsuleDefinition]) -> list[str]:
    """Union of dependency names, deduplicated in first-seen order."""
    return list(dict.fromkeys(dep for definition in definitions for dep in definition.dependencies))


class CapsuleAssembler:
    """
    Assembles compositions against one capsule registry.

    Args:
        registry: Capsule catalog used for resolution
        settings: Document and validation settings (defaults when None)
    """

    def __init__(self, registry: CapsuleRegistry, settings: AssemblerSettings | None = None):
        self.registry = registry
        self.settings = settings or AssemblerSettings()

    def assemble(self, composition: AppComposition) -> CompilationResult:
        """
        Assemble a composition into source code and an HTML document.

        Never raises: any failure is returned as ``success=False`` with the
        error message and empty code/html.
        """
        try:
            if self.settings.strict_instance_ids:
                _check_instance_ids(composition)

            resolved: list[tuple[CapsuleDefinition, CapsuleInstance]] = [
                (self.registry.get(instance.capsule_id), instance)
                for instance in composition.capsules
            ]

            capsule_code = "\n\n".join(
                rename_declaration(definition.code, instance.instance_id)
                for definition, instance in resolved
            )
            app_code = build_app_component(composition, resolved)
            code = capsule_code + "\n\n" + app_code

            html = render_document(code, composition.name, self.settings)
            dependencies = aggregate_dependencies([definition for definition, _ in resolved])
        except Exception as e:
            logger.warning("Assembly of %r failed: %s", composition.name, e)
            return CompilationResult.failure(str(e))

        logger.debug(
            "Assembled %r: %d instances, %d dependencies",
            composition.name,
            len(resolved),
            len(dependencies),
        )
        return CompilationResult(success=True, code=code, html=html, dependencies=dependencies)

    compile = assemble


def assemble(
    composition: AppComposition,
    registry: CapsuleRegistry | None = None,
    settings: AssemblerSettings | None = None,
) -> CompilationResult:
    """Assemble a composition, building the default registry when none is given."""
    if registry is None:
        registry = build_default_registry()
    return CapsuleAssembler(registry, settings).assemble(composition)
