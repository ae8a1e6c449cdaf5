"""
Error types for capsule resolution, composition checks, and configuration.
"""


class CapsuleStudioError(Exception):
    """Base exception for all capsule-studio errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CapsuleNotFoundError(CapsuleStudioError):
    """
    Raised when a composition references a capsule id absent from the catalog.

    Fatal to the whole assembly: no partial bundle is produced.
    """

    def __init__(self, capsule_id: str):
        self.capsule_id = capsule_id
        super().__init__(f"Capsule not found: {capsule_id}")


class DuplicateInstanceError(CapsuleStudioError):
    """
    Raised when two instances in one composition share an instance id.

    Both would render to the same generated identifier.
    """

    def __init__(self, instance_id: str):
        self.instance_id = instance_id
        super().__init__(f"Duplicate instance id in composition: {instance_id}")


class CatalogError(CapsuleStudioError):
    """
    Raised when a capsule registry cannot be built.

    Examples:
    - Two capsule definitions sharing one id
    """

    pass


class ConfigError(CapsuleStudioError):
    """
    Raised when assembler settings cannot be loaded.

    Examples:
    - Malformed TOML
    - Unknown or mistyped keys in the [assembler] table
    """

    pass
