# pathroute/contracts/entity.py
"""
Entity identifier contracts.

A self-describing entity id (``contact_abc``) carries its own type tag, so
the collection it belongs to is known without a database lookup.
"""
from __future__ import annotations

from dataclasses import dataclass


def pluralize(word: str) -> str:
    """Pluralize a singular type tag (``activity`` -> ``activities``)."""
    if word.endswith("y") and not word.endswith(("ay", "ey", "oy", "uy")):
        return word[:-1] + "ies"
    if word.endswith(("s", "x", "ch", "sh")):
        return word + "es"
    return word + "s"


@dataclass(frozen=True)
class EntityId:
    """Parsed ``type_id`` path segment.

    Attributes:
        type: Singular type tag before the first underscore (``contact``).
        id: Opaque token after the first underscore (``abc``).
    """

    type: str
    id: str

    @property
    def full(self) -> str:
        return f"{self.type}_{self.id}"

    @property
    def collection(self) -> str:
        return pluralize(self.type)

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type,
            "id": self.id,
            "full": self.full,
            "collection": self.collection,
        }

    def __str__(self) -> str:
        return self.full
