"""Resource identity: immutable (type, id) identifiers."""

from apiresource.core.identity.models import MalformedIdentifierError, ResourceIdentifier

__all__ = [
    "ResourceIdentifier",
    "MalformedIdentifierError",
]
