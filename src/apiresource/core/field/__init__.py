"""Field descriptors declared by resource types."""

from apiresource.core.field.models import (
    Attribute,
    Field,
    RelationshipField,
    ToManyRelationship,
    ToOneRelationship,
)

__all__ = [
    "Field",
    "Attribute",
    "RelationshipField",
    "ToOneRelationship",
    "ToManyRelationship",
]
