"""Resource identity models.

Usage:
    identifier = ResourceIdentifier(type="articles", id="1")
    same = ResourceIdentifier.from_dict({"type": "articles", "id": "1"})
    assert identifier == same
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

ResourceType = str


class MalformedIdentifierError(ValueError):
    """Raised when an identifier dictionary lacks a string "type" or "id"."""

    pass


@dataclass(frozen=True, slots=True)
class ResourceIdentifier:
    """Uniquely names a resource that exists on the server.

    Two identifiers are equal iff both type and id match.
    """

    type: ResourceType
    id: str

    def __hash__(self) -> int:
        return hash((self.type, self.id))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceIdentifier:
        """Build an identifier from a flat dictionary.

        Args:
            data: Mapping holding string values under "type" and "id".

        Returns:
            New ResourceIdentifier.

        Raises:
            MalformedIdentifierError: If either key is missing or not a string.
        """
        if not isinstance(data, Mapping):
            raise MalformedIdentifierError(
                f"Identifier must be a mapping, got {type(data).__name__}"
            )
        for key in ("type", "id"):
            if key not in data:
                raise MalformedIdentifierError(f"Identifier is missing {key!r}: {dict(data)!r}")
            if not isinstance(data[key], str):
                raise MalformedIdentifierError(
                    f"Identifier {key!r} must be a string, got {type(data[key]).__name__}"
                )
        return cls(type=data["type"], id=data["id"])

    def to_dict(self) -> dict[str, str]:
        """Return a dictionary with "type" and "id" keys."""
        return {"type": self.type, "id": self.id}
