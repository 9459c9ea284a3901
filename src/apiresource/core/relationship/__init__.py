"""Relationship payloads and resolved relationship collections."""

from apiresource.core.relationship.collection import LinkedResourceCollection
from apiresource.core.relationship.models import RelationshipData, ResolvedCollection

__all__ = [
    "RelationshipData",
    "ResolvedCollection",
    "LinkedResourceCollection",
]
