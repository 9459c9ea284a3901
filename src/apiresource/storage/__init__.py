"""Persisted representation of resources."""

from apiresource.storage.codec import (
    DroppedRelationshipWarning,
    MalformedRecordError,
    ResourceCodec,
    UnknownResourceTypeError,
)
from apiresource.storage.protocol import RecordCodec

__all__ = [
    "RecordCodec",
    "ResourceCodec",
    "DroppedRelationshipWarning",
    "MalformedRecordError",
    "UnknownResourceTypeError",
]
