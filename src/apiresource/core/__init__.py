"""Core functionalities: identity, fields, relationships and resources.

Architecture Note:
    core/ holds the in-memory resource model and its dirty tracking.
    Conversion to and from persisted records lives in storage/.
"""

from apiresource.core.field import (
    Attribute,
    Field,
    RelationshipField,
    ToManyRelationship,
    ToOneRelationship,
)
from apiresource.core.identity import MalformedIdentifierError, ResourceIdentifier
from apiresource.core.relationship import (
    LinkedResourceCollection,
    RelationshipData,
    ResolvedCollection,
)
from apiresource.core.resource import (
    NULL,
    Resource,
    ResourceRegistry,
    UnknownFieldError,
    get_registry,
    resource,
)

__all__ = [
    # Identity
    "ResourceIdentifier",
    "MalformedIdentifierError",
    # Fields
    "Field",
    "Attribute",
    "RelationshipField",
    "ToOneRelationship",
    "ToManyRelationship",
    # Relationships
    "RelationshipData",
    "ResolvedCollection",
    "LinkedResourceCollection",
    # Resource
    "Resource",
    "ResourceRegistry",
    "resource",
    "get_registry",
    "NULL",
    "UnknownFieldError",
]
