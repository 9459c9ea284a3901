"""Relationship models: raw payloads and the resolved-collection protocol.

Usage:
    data = RelationshipData.from_dict({"data": [{"type": "people", "id": "9"}]})
    data.to_dict()  # {"data": [{"type": "people", "id": "9"}]}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from apiresource.core.identity import MalformedIdentifierError, ResourceIdentifier

SELF_URL_KEY = "selfURL"
RELATED_URL_KEY = "relatedURL"
DATA_KEY = "data"


@runtime_checkable
class ResolvedCollection(Protocol):
    """Lazily-resolved relationship value that tracks its own dirtiness.

    A field holding such a value delegates its dirty state to the value
    instead of comparing it against the snapshot.
    """

    @property
    def is_dirty(self) -> bool: ...


def _identifiers_from(entries: Iterable[Any]) -> tuple[ResourceIdentifier, ...]:
    identifiers = []
    for entry in entries:
        try:
            identifiers.append(ResourceIdentifier.from_dict(entry))
        except MalformedIdentifierError:
            continue
    return tuple(identifiers)


@dataclass(frozen=True, slots=True)
class RelationshipData:
    """Unresolved relationship payload.

    Each member is independently optional: a relationship may be known only by
    link, only by identifiers, or both.

    Attributes:
        self_link: URL of the relationship itself.
        related_link: URL of the related resources.
        identifiers: Identifiers of the related resources.
    """

    self_link: str | None = None
    related_link: str | None = None
    identifiers: tuple[ResourceIdentifier, ...] | None = None

    def __post_init__(self) -> None:
        if self.identifiers is not None and not isinstance(self.identifiers, tuple):
            object.__setattr__(self, "identifiers", tuple(self.identifiers))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RelationshipData:
        """Build relationship data from a flat dictionary.

        "selfURL", "relatedURL" and "data" are each optional. Link values that
        are not strings and a "data" value that is not a list decode as absent.
        Malformed identifier entries inside "data" are dropped.

        Args:
            data: Mapping in the persisted relationship format.

        Returns:
            New RelationshipData.
        """
        self_link = data.get(SELF_URL_KEY)
        related_link = data.get(RELATED_URL_KEY)
        entries = data.get(DATA_KEY)
        return cls(
            self_link=self_link if isinstance(self_link, str) else None,
            related_link=related_link if isinstance(related_link, str) else None,
            identifiers=_identifiers_from(entries) if isinstance(entries, list) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the sparse dictionary form; absent members have no key."""
        result: dict[str, Any] = {}
        if self.self_link is not None:
            result[SELF_URL_KEY] = self.self_link
        if self.related_link is not None:
            result[RELATED_URL_KEY] = self.related_link
        if self.identifiers is not None:
            result[DATA_KEY] = [identifier.to_dict() for identifier in self.identifiers]
        return result
