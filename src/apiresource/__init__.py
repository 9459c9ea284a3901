"""apiresource: client-side resource model for JSON:API data layers.

Usage:
    from apiresource import Attribute, Resource, ResourceCodec, resource

    @resource
    class Article(Resource):
        resource_type = "articles"
        fields = (Attribute("title"), Attribute("body"))

    article = Article.from_payload("1", {"title": "Hello", "body": "..."})
    article.title = "Hello, world"
    article.dirty_fields()       # [Attribute(name='title', ...)]

    data = ResourceCodec().dumps(article)
"""

__version__ = "0.1.0"

# Core primitives
from apiresource.core import (
    NULL,
    Attribute,
    Field,
    LinkedResourceCollection,
    MalformedIdentifierError,
    RelationshipData,
    RelationshipField,
    ResolvedCollection,
    Resource,
    ResourceIdentifier,
    ResourceRegistry,
    ToManyRelationship,
    ToOneRelationship,
    UnknownFieldError,
    get_registry,
    resource,
)

# Persisted representation
from apiresource.storage import (
    DroppedRelationshipWarning,
    MalformedRecordError,
    RecordCodec,
    ResourceCodec,
    UnknownResourceTypeError,
)

__all__ = [
    # Version
    "__version__",
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
    # Storage
    "RecordCodec",
    "ResourceCodec",
    "MalformedRecordError",
    "UnknownResourceTypeError",
    "DroppedRelationshipWarning",
]
