"""
Tests for capsule and composition spec types.

Basic validation and construction tests to ensure specs work correctly.
"""

import pytest
from pydantic import ValidationError

from capsule_studio.specs import (
    AppComposition,
    CapsuleCategory,
    CapsuleDefinition,
    CapsuleInstance,
    CapsuleProp,
    CompilationResult,
    LayoutKind,
    PropType,
)


def test_capsule_definition_creation():
    """Test creating a CapsuleDefinition."""
    capsule = CapsuleDefinition(
        id="badge",
        name="Badge",
        category="ui",
        props=[CapsuleProp(name="label", type="string", required=True)],
        code="function Badge({ label }) { return label }",
    )
    assert capsule.category is CapsuleCategory.UI
    assert capsule.props[0].type is PropType.STRING
    assert capsule.dependencies == []
    assert capsule.preview is None


def test_capsule_definition_is_frozen():
    """Test that catalog entries cannot be reassigned."""
    capsule = CapsuleDefinition(id="a", name="A", category="logic", code="function A() {}")
    with pytest.raises(ValidationError):
        capsule.code = "function B() {}"


def test_capsule_category_is_closed():
    """Test that unknown categories are rejected."""
    with pytest.raises(ValidationError):
        CapsuleDefinition(id="a", name="A", category="widget", code="function A() {}")


def test_prop_type_is_closed():
    """Test that unknown prop types are rejected."""
    with pytest.raises(ValidationError):
        CapsuleProp(name="when", type="date")


def test_composition_accepts_camel_case():
    """Test validating a composition written with camelCase keys."""
    composition = AppComposition.model_validate(
        {
            "name": "Demo",
            "description": "d",
            "layout": "grid",
            "capsules": [{"capsuleId": "button", "instanceId": "a", "props": {"text": "Go"}}],
        }
    )
    instance = composition.capsules[0]
    assert instance.capsule_id == "button"
    assert instance.instance_id == "a"
    assert instance.props == {"text": "Go"}


def test_composition_layout_normalized():
    """Test that enum layouts are stored by value and any string is accepted."""
    assert AppComposition(name="x", layout=LayoutKind.GRID).layout == "grid"
    assert AppComposition(name="x", layout="masonry").layout == "masonry"
    assert AppComposition(name="x").layout == "single"


def test_instance_props_kept_as_given():
    """Test that prop values are not coerced."""
    marker = object()
    instance = CapsuleInstance(
        capsule_id="c", instance_id="i", props={"n": 1, "t": (1, 2), "o": marker}
    )
    assert instance.props["n"] == 1
    assert instance.props["t"] == (1, 2)
    assert instance.props["o"] is marker


def test_compilation_result_failure_shape():
    """Test the failure constructor."""
    result = CompilationResult.failure("boom")
    assert result.success is False
    assert result.code == ""
    assert result.html == ""
    assert result.error == "boom"
    assert result.dependencies == []
