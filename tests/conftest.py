"""Shared pytest fixtures for capsule-studio tests."""

import pytest

from capsule_studio.catalog import CapsuleRegistry, build_default_registry
from capsule_studio.compiler import CapsuleAssembler
from capsule_studio.specs import (
    AppComposition,
    CapsuleDefinition,
    CapsuleInstance,
    CapsuleProp,
)


@pytest.fixture
def registry() -> CapsuleRegistry:
    """Return a fresh registry with every built-in capsule."""
    return build_default_registry()


@pytest.fixture
def assembler(registry: CapsuleRegistry) -> CapsuleAssembler:
    """Return an assembler over the default registry."""
    return CapsuleAssembler(registry)


@pytest.fixture
def badge_capsule() -> CapsuleDefinition:
    """Return a small capsule with external dependencies."""
    return CapsuleDefinition(
        id="badge",
        name="Badge",
        description="Status badge",
        category="ui",
        props=[
            CapsuleProp(name="label", type="string", required=True, default="New"),
        ],
        code="\nfunction Badge({ label = 'New' }) {\n  return <span>{label}</span>\n}",
        dependencies=["clsx", "react-icons"],
    )


@pytest.fixture
def chip_capsule() -> CapsuleDefinition:
    """Return a second capsule sharing one dependency with badge."""
    return CapsuleDefinition(
        id="chip",
        name="Chip",
        category="ui",
        code="\nfunction Chip({ text = '' }) {\n  return <em>{text}</em>\n}",
        dependencies=["clsx", "date-fns"],
    )


@pytest.fixture
def demo_composition() -> AppComposition:
    """Return a one-button grid composition."""
    return AppComposition(
        name="Demo",
        description="d",
        layout="grid",
        capsules=[
            CapsuleInstance(
                capsule_id="button",
                instance_id="a",
                props={"text": "Go", "variant": "primary"},
            ),
        ],
    )
