"""
Capsule registry.

An explicit, immutable collection of capsule definitions. A registry is
built once from one or more sublists and handed to the assembler; nothing
registers itself at import time.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

from capsule_studio.errors import CapsuleNotFoundError, CatalogError
from capsule_studio.specs.capsule import CapsuleCategory, CapsuleDefinition

logger = logging.getLogger(__name__)


class CapsuleRegistry:
    """
    Read-only capsule catalog.

    Lookups are linear scans in catalog order, so with ``strict=False`` the
    first definition of a duplicated id always wins.

    Args:
        capsules: Capsule definitions in catalog order.
        strict: Reject duplicate capsule ids with CatalogError.
    """

    def __init__(self, capsules: Iterable[CapsuleDefinition], *, strict: bool = True):
        self._capsules: tuple[CapsuleDefinition, ...] = tuple(capsules)

        duplicates = sorted(
            capsule_id
            for capsule_id, count in Counter(c.id for c in self._capsules).items()
            if count > 1
        )
        if duplicates:
            if strict:
                raise CatalogError(f"Duplicate capsule ids in catalog: {', '.join(duplicates)}")
            logger.warning(
                "Duplicate capsule ids in catalog, first definition wins: %s",
                ", ".join(duplicates),
            )

    @classmethod
    def from_sources(
        cls, *sources: Sequence[CapsuleDefinition], strict: bool = True
    ) -> CapsuleRegistry:
        """Build a registry by concatenating capsule sublists in order."""
        return cls((capsule for source in sources for capsule in source), strict=strict)

    def resolve(self, capsule_id: str) -> CapsuleDefinition | None:
        """Return the capsule with exactly this id, or None."""
        for capsule in self._capsules:
            if capsule.id == capsule_id:
                return capsule
        return None

    def get(self, capsule_id: str) -> CapsuleDefinition:
        """Return the capsule with this id, raising CapsuleNotFoundError if absent."""
        capsule = self.resolve(capsule_id)
        if capsule is None:
            raise CapsuleNotFoundError(capsule_id)
        return capsule

    def list_capsules(
        self, category: CapsuleCategory | str | None = None
    ) -> list[CapsuleDefinition]:
        """
        List capsules in catalog order.

        Args:
            category: Only return capsules in this category. An unknown
                category matches nothing.
        """
        if category is None:
            return list(self._capsules)
        wanted = category.value if isinstance(category, CapsuleCategory) else category
        return [c for c in self._capsules if c.category.value == wanted]

    @property
    def ids(self) -> list[str]:
        """Capsule ids in catalog order."""
        return [c.id for c in self._capsules]

    def __len__(self) -> int:
        return len(self._capsules)

    def __iter__(self) -> Iterator[CapsuleDefinition]:
        return iter(self._capsules)

    def __contains__(self, capsule_id: object) -> bool:
        return any(c.id == capsule_id for c in self._capsules)
