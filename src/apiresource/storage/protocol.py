"""Codec protocol for swappable persisted representations.

The persistence layer that owns on-disk or cache storage depends only on this
protocol, so the record format can change without touching it.

Usage:
    codec: RecordCodec = ResourceCodec()
    data = codec.dumps(article)
    restored = codec.loads(data)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from apiresource.core.resource import Resource


@runtime_checkable
class RecordCodec(Protocol):
    """Abstract codec interface. Implementations own the record format."""

    def encode(self, resource: Resource) -> dict[str, Any]:
        """Convert resource identity, state and relationships to a flat record."""
        ...

    def decode(
        self, record: Mapping[str, Any], resource_class: type[Resource] | None = None
    ) -> Resource:
        """Build a resource from a record produced by encode()."""
        ...

    def dumps(self, resource: Resource) -> bytes:
        """Serialize resource to bytes."""
        ...

    def loads(self, data: bytes, resource_class: type[Resource] | None = None) -> Resource:
        """Restore resource from bytes produced by dumps()."""
        ...
