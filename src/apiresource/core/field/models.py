"""Field descriptor models.

Each resource type declares an ordered tuple of fields. Descriptors are static
metadata: they never hold values, the Resource does.

Usage:
    @resource
    class Article(Resource):
        resource_type = "articles"
        fields = (
            Attribute("title"),
            Attribute("body", serialized_name="content"),
            ToOneRelationship("author", linked_type="people"),
            ToManyRelationship("comments", linked_type="comments"),
        )
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Field:
    """Base field descriptor.

    Attributes:
        name: Attribute name on the resource.
        serialized_name: Key used in the wire payload, if different from name.
        read_only: Whether the field is excluded when writing to the server.
    """

    name: str
    serialized_name: str | None = None
    read_only: bool = False

    @property
    def key(self) -> str:
        """Wire key for this field."""
        return self.serialized_name or self.name

    @property
    def is_relationship(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Attribute(Field):
    """Plain attribute (string, number, date, ...)."""


@dataclass(frozen=True, slots=True)
class RelationshipField(Field):
    """Field linking to other resources.

    Attributes:
        linked_type: resource_type of the linked resources, if fixed.
    """

    linked_type: str | None = None

    @property
    def is_relationship(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ToOneRelationship(RelationshipField):
    """Relationship to a single resource."""


@dataclass(frozen=True, slots=True)
class ToManyRelationship(RelationshipField):
    """Relationship to a collection of resources."""
