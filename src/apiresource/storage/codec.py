"""JSON record codec for resources.

A record holds identity, load state, metadata and raw relationships. Field
values are not persisted; they are re-fetched after restore.

Record layout:
    {
        "type": "articles",
        "id": "1",
        "URL": "https://example.com/articles/1",
        "isLoaded": true,
        "meta": {...},
        "relationships": {"author": {"data": [{"type": "people", "id": "9"}]}},
    }

Usage:
    codec = ResourceCodec()
    data = codec.dumps(article)
    restored = codec.loads(data)
    assert restored == article
"""

from __future__ import annotations

import json
import warnings
from collections.abc import Mapping
from typing import Any

from apiresource.config import CodecSettings
from apiresource.core.relationship import RelationshipData
from apiresource.core.resource import Resource, ResourceRegistry, get_registry

TYPE_KEY = "type"
ID_KEY = "id"
URL_KEY = "URL"
IS_LOADED_KEY = "isLoaded"
META_KEY = "meta"
RELATIONSHIPS_KEY = "relationships"


class MalformedRecordError(ValueError):
    """Raised when a record or its bytes cannot be read as a mapping."""

    pass


class UnknownResourceTypeError(LookupError):
    """Raised when no resource class can be resolved for a record."""

    pass


class DroppedRelationshipWarning(UserWarning):
    """Emitted when a malformed relationship entry is dropped during restore."""

    pass


class ResourceCodec:
    """Converts resources to and from flat records and JSON bytes.

    Args:
        settings: Codec settings (loaded from the environment if None).
        registry: Registry used to resolve record types (global if None).
    """

    def __init__(
        self,
        settings: CodecSettings | None = None,
        registry: ResourceRegistry | None = None,
    ) -> None:
        self._settings = settings or CodecSettings()
        self._registry = registry or get_registry()

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def encode(self, resource: Resource) -> dict[str, Any]:
        """Convert a resource to its persisted record.

        Args:
            resource: Resource to encode.

        Returns:
            Record with type, id, URL, isLoaded, meta and relationships.
        """
        return {
            TYPE_KEY: resource.resource_type,
            ID_KEY: resource.id,
            URL_KEY: resource.location,
            IS_LOADED_KEY: resource.is_loaded,
            META_KEY: resource.meta,
            RELATIONSHIPS_KEY: {
                name: data.to_dict() for name, data in resource.relationships.items()
            },
        }

    def decode(
        self, record: Mapping[str, Any], resource_class: type[Resource] | None = None
    ) -> Resource:
        """Build a resource from a persisted record.

        Args:
            record: Record produced by encode().
            resource_class: Class to instantiate. Resolved from the record's
                "type" through the registry if None.

        Returns:
            Restored resource with no field values.

        Raises:
            MalformedRecordError: If record is not a mapping, or its type
                contradicts resource_class.
            UnknownResourceTypeError: If no class can be resolved.
        """
        return self._decode(record, resource_class, stacklevel=5)

    def _decode(
        self,
        record: Mapping[str, Any],
        resource_class: type[Resource] | None,
        stacklevel: int,
    ) -> Resource:
        if not isinstance(record, Mapping):
            raise MalformedRecordError(f"Record must be a mapping, got {type(record).__name__}")

        record_type = record.get(TYPE_KEY)
        if resource_class is None:
            resource_class = (
                self._registry.get_type(record_type) if isinstance(record_type, str) else None
            )
            if resource_class is None:
                raise UnknownResourceTypeError(
                    f"No resource class registered for type {record_type!r}"
                )
        elif record_type is not None and record_type != resource_class.resource_type:
            raise MalformedRecordError(
                f"Record of type {record_type!r} cannot restore "
                f"{resource_class.__name__} ({resource_class.resource_type!r})"
            )

        instance = resource_class()
        self._restore(instance, record, stacklevel)
        return instance

    def restore_into(self, resource: Resource, record: Mapping[str, Any]) -> None:
        """Overwrite a resource's persisted members from a record.

        Missing or mistyped optional keys fall back to defaults.

        Args:
            resource: Resource to restore into.
            record: Record produced by encode().
        """
        self._restore(resource, record, stacklevel=4)

    def _restore(self, resource: Resource, record: Mapping[str, Any], stacklevel: int) -> None:
        # stacklevel counts frames from the warnings.warn call up to the public caller.
        resource_id = record.get(ID_KEY)
        location = record.get(URL_KEY)
        is_loaded = record.get(IS_LOADED_KEY)
        meta = record.get(META_KEY)

        resource.id = resource_id if isinstance(resource_id, str) else None
        resource.location = location if isinstance(location, str) else None
        resource.is_loaded = is_loaded if isinstance(is_loaded, bool) else False
        resource.meta = dict(meta) if isinstance(meta, Mapping) else None
        resource.relationships = self._decode_relationships(
            record.get(RELATIONSHIPS_KEY), stacklevel
        )

    def _decode_relationships(self, block: Any, stacklevel: int) -> dict[str, RelationshipData]:
        """Decode the relationships block, dropping malformed entries."""
        if not isinstance(block, Mapping):
            return {}

        relationships: dict[str, RelationshipData] = {}
        for name, entry in block.items():
            if isinstance(name, str) and isinstance(entry, Mapping):
                relationships[name] = RelationshipData.from_dict(entry)
            elif self._settings.warn_on_dropped_relationships:
                warnings.warn(
                    f"Dropping malformed relationship {name!r}: expected a mapping, "
                    f"got {type(entry).__name__}",
                    DroppedRelationshipWarning,
                    stacklevel=stacklevel,
                )
        return relationships

    def dumps(self, resource: Resource) -> bytes:
        """Serialize a resource's record to JSON bytes.

        Raises:
            TypeError: If meta holds values JSON cannot represent.
        """
        text = json.dumps(
            self.encode(resource),
            sort_keys=self._settings.sort_keys,
            indent=self._settings.indent,
        )
        return text.encode(self._settings.encoding)

    def loads(self, data: bytes, resource_class: type[Resource] | None = None) -> Resource:
        """Restore a resource from bytes produced by dumps().

        Raises:
            MalformedRecordError: If data is not valid JSON in the configured
                encoding, or does not hold a record.
            UnknownResourceTypeError: If no class can be resolved.
        """
        try:
            record = json.loads(data.decode(self._settings.encoding))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedRecordError(f"Cannot read resource record: {e}") from e
        return self._decode(record, resource_class, stacklevel=5)
