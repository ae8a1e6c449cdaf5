"""
Capsule specification types.

A capsule is one catalog entry: a named UI snippet with a declared props
schema and a dependency list. The ``code`` field is an opaque text asset and
is never parsed.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =============================================================================
# Enums
# =============================================================================


class CapsuleCategory(str, Enum):
    """Capsule categories, used for catalog filtering only."""

    UI = "ui"
    LOGIC = "logic"
    LAYOUT = "layout"
    FEATURE = "feature"


class PropType(str, Enum):
    """Declared prop value types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


# =============================================================================
# Props Schema
# =============================================================================


class CapsuleProp(BaseModel):
    """
    Capsule prop field specification.

    Describes what the embedded source expects; not enforced at assembly time.

    Example:
        CapsuleProp(name="text", type="string", required=True, default="Click me")
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Prop name")
    type: PropType = Field(description="Prop value type")
    required: bool = Field(default=False, description="Is this prop required?")
    default: Any | None = Field(default=None, description="Default value")
    description: str = Field(default="", description="Prop description")


# =============================================================================
# Capsules
# =============================================================================


class CapsuleDefinition(BaseModel):
    """
    Capsule definition.

    ``code`` holds exactly one top-level ``function`` declaration that takes a
    single destructured props object.

    Example:
        CapsuleDefinition(
            id="button",
            name="Button",
            description="Interactive button",
            category="ui",
            props=[CapsuleProp(name="text", type="string", required=True)],
            code="function Button({ text = 'Click me' }) { ... }",
        )
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Catalog key, unique within a registry")
    name: str = Field(description="Display name")
    description: str = Field(default="", description="Display description")
    category: CapsuleCategory = Field(description="Capsule category")
    props: list[CapsuleProp] = Field(default_factory=list, description="Props schema")
    code: str = Field(description="Component source, kept opaque")
    dependencies: list[str] = Field(
        default_factory=list, description="External package names (informational)"
    )
    preview: str | None = Field(default=None, description="Preview image URL")

    def get_prop(self, name: str) -> CapsuleProp | None:
        """Get prop field by name."""
        for prop in self.props:
            if prop.name == name:
                return prop
        return None
