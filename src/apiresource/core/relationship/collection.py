"""Resolved to-many relationship collection.

A LinkedResourceCollection is the live value of a to-many field once its
related resources have been fetched. It records which resources were linked or
unlinked locally so the owning Resource can report the field as dirty.

Usage:
    comments = LinkedResourceCollection.from_relationship_data(
        article.relationships["comments"]
    )
    comments.append_existing(fetched_comment)  # loader path, stays clean
    article.set_value(comments, "comments")

    comments.link(new_comment)
    assert article.is_dirty("comments")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from apiresource.core.relationship.models import RelationshipData

if TYPE_CHECKING:
    from apiresource.core.resource import Resource


def _contains(items: list[Resource], resource: Resource) -> bool:
    # Resources without an id compare equal, so membership is by identity.
    return any(item is resource for item in items)


def _discard(items: list[Resource], resource: Resource) -> bool:
    for index, item in enumerate(items):
        if item is resource:
            del items[index]
            return True
    return False


class LinkedResourceCollection:
    """Collection of related resources with link/unlink tracking.

    Args:
        resources: Resources already known to be linked on the server.
        self_link: URL of the relationship itself.
        related_link: URL of the related resources.
    """

    def __init__(
        self,
        resources: Iterable[Resource] = (),
        *,
        self_link: str | None = None,
        related_link: str | None = None,
    ) -> None:
        self.resources: list[Resource] = list(resources)
        self.self_link = self_link
        self.related_link = related_link
        self.is_loaded = bool(self.resources)
        self.added: list[Resource] = []
        self.removed: list[Resource] = []

    @classmethod
    def from_relationship_data(cls, data: RelationshipData) -> LinkedResourceCollection:
        """Create an empty, unloaded collection carrying the payload's links."""
        return cls(self_link=data.self_link, related_link=data.related_link)

    @property
    def is_dirty(self) -> bool:
        """True if resources were linked or unlinked since the last rebase."""
        return bool(self.added or self.removed)

    def append_existing(self, resource: Resource) -> None:
        """Add a resource that is already linked on the server.

        Used by loaders; does not make the collection dirty.
        """
        if not _contains(self.resources, resource):
            self.resources.append(resource)
        self.is_loaded = True

    def link(self, resource: Resource) -> None:
        """Link a resource locally.

        Linking a resource that was unlinked since the last rebase cancels the
        pending unlink instead of recording an addition.
        """
        if not _discard(self.removed, resource) and not _contains(self.added, resource):
            self.added.append(resource)
        if not _contains(self.resources, resource):
            self.resources.append(resource)

    def unlink(self, resource: Resource) -> None:
        """Unlink a resource locally.

        Unlinking a resource that was linked since the last rebase cancels the
        pending link instead of recording a removal.
        """
        if not _discard(self.added, resource) and not _contains(self.removed, resource):
            self.removed.append(resource)
        _discard(self.resources, resource)

    def mark_clean(self) -> None:
        """Accept pending links and unlinks as the new baseline."""
        self.added.clear()
        self.removed.clear()

    def to_relationship_data(self) -> RelationshipData:
        """Describe the collection as raw relationship data.

        Resources that have no id yet are left out of the identifier list.
        """
        identifiers = tuple(
            resource.identifier for resource in self.resources if resource.id is not None
        )
        return RelationshipData(
            self_link=self.self_link,
            related_link=self.related_link,
            identifiers=identifiers,
        )

    def __iter__(self) -> Iterator[Resource]:
        return iter(self.resources)

    def __len__(self) -> int:
        return len(self.resources)

    def __contains__(self, resource: object) -> bool:
        return any(item is resource for item in self.resources)

    def __repr__(self) -> str:
        return (
            f"LinkedResourceCollection({self.resources!r}, "
            f"added={len(self.added)}, removed={len(self.removed)})"
        )
