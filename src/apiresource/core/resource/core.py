"""Resource base class, type registry and decorator.

Field values live in an explicit mapping keyed by declared field name, next to
a snapshot of the last values accepted as clean. Dirtiness is derived from the
two mappings:

    1. No snapshot for the field          -> dirty
    2. Live value is a resolved collection -> the collection's own is_dirty
    3. Snapshot is NULL and value is None  -> clean
    4. Otherwise                           -> dirty iff value is not snapshot

Rule 4 compares identity, not equality: replacing a value with an equal copy
still counts as a write.

Usage:
    @resource
    class Article(Resource):
        resource_type = "articles"
        fields = (Attribute("title"), ToManyRelationship("comments"))

    article = Article.from_payload("1", {"title": "Hello"})
    assert not article.is_dirty()

    article.title = "Hi"                 # local mutation, snapshot untouched
    assert article.dirty_fields() == [Article.field_named("title")]

    article.mark_field("title", False)   # accept after a successful save
    assert not article.is_dirty()
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Self, overload

from apiresource.core.field import Field
from apiresource.core.identity import ResourceIdentifier
from apiresource.core.identity.models import ResourceType
from apiresource.core.relationship import RelationshipData, ResolvedCollection
from apiresource.core.resource.models import NULL, UnknownFieldError

_RESERVED_NAMES = frozenset({"id", "location", "is_loaded", "meta", "relationships"})


class ResourceRegistry:
    """Process-local registry mapping resource type names to classes.

    Lets persisted records, which carry only a type name, be restored into
    the right Resource subclass.
    """

    def __init__(self) -> None:
        """Initialize empty resource registry."""
        self._by_type: dict[str, type[Resource]] = {}

    def register(self, cls: type[Resource]) -> type[Resource]:
        """Register a resource class under its resource_type.

        Registering the same class twice is a no-op.

        Args:
            cls: Resource subclass to register.

        Returns:
            The registered class.

        Raises:
            RuntimeError: If another class is registered under the same type.
        """
        existing = self._by_type.get(cls.resource_type)
        if existing is cls:
            return cls
        if existing is not None:
            raise RuntimeError(
                f"Resource type collision: {cls} and {existing} both declare "
                f"resource_type {cls.resource_type!r}"
            )

        self._by_type[cls.resource_type] = cls
        return cls

    def get_type(self, resource_type: ResourceType) -> type[Resource] | None:
        """Get the class registered for a resource type name, or None."""
        return self._by_type.get(resource_type)


# Module-level registry instance
_registry = ResourceRegistry()


def get_registry() -> ResourceRegistry:
    """Access the global resource registry.

    Returns:
        The process-local ResourceRegistry instance.
    """
    return _registry


class Resource:
    """Base class for client-side resources.

    Subclasses declare ``resource_type`` and ``fields`` as class attributes.
    Declared fields can be read and assigned as plain attributes: reading is
    ``value_for_field`` and assigning is ``update_field`` (a local edit that
    makes the field dirty).

    Thread safety: a Resource is plain mutable state with no locking. Loaders
    should publish an instance only after ``from_payload`` returns, and callers
    sharing one instance across threads must serialize their own writes.

    Args:
        id: Server id, None until assigned by the server.
        location: Canonical URL of the resource.
        meta: Out-of-band server metadata, not dirty-tracked.
    """

    resource_type: ClassVar[ResourceType]
    fields: ClassVar[tuple[Field, ...]] = ()

    _fields_by_name: ClassVar[dict[str, Field]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.fields = tuple(cls.fields)
        by_name: dict[str, Field] = {}
        for f in cls.fields:
            if f.name in by_name:
                raise TypeError(f"{cls.__name__} declares field {f.name!r} twice")
            if f.name in _RESERVED_NAMES or f.name.startswith("_") or hasattr(Resource, f.name):
                raise TypeError(f"{cls.__name__} field name {f.name!r} is reserved")
            by_name[f.name] = f
        cls._fields_by_name = by_name

    def __init__(
        self,
        id: str | None = None,
        location: str | None = None,
        *,
        meta: dict[str, Any] | None = None,
    ) -> None:
        if not isinstance(getattr(type(self), "resource_type", None), str):
            raise TypeError(f"{type(self).__name__} must define resource_type")
        self.id = id
        self.location = location
        self.is_loaded = False
        self.meta = meta
        self.relationships: dict[str, RelationshipData] = {}
        self._values: dict[str, Any] = {}
        self._original_values: dict[str, Any] = {}

    @classmethod
    def from_payload(
        cls,
        id: str | None,
        values: Mapping[str, Any] | None = None,
        *,
        location: str | None = None,
        meta: dict[str, Any] | None = None,
        relationships: Mapping[str, RelationshipData] | None = None,
    ) -> Self:
        """Create a loaded, clean resource from already-parsed payload data.

        The instance is snapshotted before it is returned, so no reader can
        observe it half-tracked.

        Args:
            id: Server id.
            values: Field values keyed by declared field name.
            location: Canonical URL.
            meta: Server metadata.
            relationships: Raw relationship data keyed by relationship name.

        Returns:
            Resource with ``is_loaded`` set and every field clean.

        Raises:
            UnknownFieldError: If values name an undeclared field.
        """
        instance = cls(id, location, meta=meta)
        for name, value in (values or {}).items():
            instance.set_value(name, value)
        instance.relationships.update(relationships or {})
        instance.mark_clean()
        instance.is_loaded = True
        return instance

    @classmethod
    def field_named(cls, name: str) -> Field | None:
        """Return the declared field called ``name``, or None."""
        return cls._fields_by_name.get(name)

    @property
    def identifier(self) -> ResourceIdentifier:
        """Identifier of this resource.

        Raises:
            ValueError: If the resource has no id yet.
        """
        if self.id is None:
            raise ValueError(f"{self!r} has no id and cannot be identified")
        return ResourceIdentifier(type=self.resource_type, id=self.id)

    # Field access

    def _require_field(self, name: str) -> None:
        if name not in self._fields_by_name:
            raise UnknownFieldError(f"{self.resource_type!r} has no field {name!r}")

    def value_for_field(self, name: str) -> Any:
        """Return the live value of a declared field, None if empty.

        Raises:
            UnknownFieldError: If ``name`` is not a declared field.
        """
        self._require_field(name)
        return self._values.get(name)

    def set_value(self, name: str, value: Any) -> None:
        """Write a value and record it as the clean snapshot.

        This is the loader path: the written value is treated as the server
        baseline. Use ``update_field`` for local edits.

        Raises:
            UnknownFieldError: If ``name`` is not a declared field.
        """
        self._require_field(name)
        self._values[name] = value
        self._original_values[name] = NULL if value is None else value

    def update_field(self, name: str, value: Any) -> None:
        """Write a value as a local edit, leaving the snapshot untouched.

        Raises:
            UnknownFieldError: If ``name`` is not a declared field.
        """
        self._require_field(name)
        self._values[name] = value

    # Dirty tracking

    @overload
    def is_dirty(self) -> bool: ...

    @overload
    def is_dirty(self, name: str) -> bool: ...

    def is_dirty(self, name: str | None = None) -> bool:
        """Check whether a field, or any declared field, diverged from its snapshot.

        Args:
            name: Field to check. If omitted, checks every declared field.

        Returns:
            True if dirty.

        Raises:
            UnknownFieldError: If ``name`` is not a declared field.
        """
        if name is None:
            return any(self.is_dirty(f.name) for f in self.fields)

        self._require_field(name)
        if name not in self._original_values:
            return True

        original = self._original_values[name]
        value = self._values.get(name)

        if _delegates_dirtiness(value):
            return bool(value.is_dirty)

        if original is NULL and value is None:
            return False
        return original is not value

    def dirty_fields(self, *, writable_only: bool = False) -> list[Field]:
        """Return dirty fields in declaration order.

        Args:
            writable_only: Leave out fields declared ``read_only``, which are
                never sent to the server.
        """
        return [
            f
            for f in self.fields
            if not (writable_only and f.read_only) and self.is_dirty(f.name)
        ]

    def mark_field(self, name: str, dirty: bool) -> None:
        """Force a field dirty or rebase its snapshot on the live value.

        Args:
            name: Declared field name.
            dirty: True drops the snapshot so the field is written on next save
                even if unchanged. False snapshots the current value as clean,
                and rebases a resolved collection value through its own
                ``mark_clean()`` when it has one.

        Raises:
            UnknownFieldError: If ``name`` is not a declared field.
        """
        self._require_field(name)
        if dirty:
            self._original_values.pop(name, None)
            return

        value = self._values.get(name)
        if _delegates_dirtiness(value):
            mark_clean = getattr(value, "mark_clean", None)
            if callable(mark_clean):
                mark_clean()
        self._original_values[name] = NULL if value is None else value

    def mark_clean(self) -> None:
        """Snapshot every declared field as clean, collections included."""
        for f in self.fields:
            self.mark_field(f.name, False)

    def unload(self) -> None:
        """Empty every declared field and return to placeholder state.

        Identity and raw relationships survive; a reload repopulates both.
        """
        for f in self.fields:
            self.set_value(f.name, None)
        self.is_loaded = False

    # Dynamic attribute access for declared fields

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if not name.startswith("_") and name in type(self)._fields_by_name:
            return self.value_for_field(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self)._fields_by_name:
            self.update_field(name, value)
        else:
            object.__setattr__(self, name, value)

    # Persistence

    def __getstate__(self) -> dict[str, Any]:
        # Late import to avoid circular dependency
        from apiresource.storage.codec import ResourceCodec

        return ResourceCodec().encode(self)

    def __setstate__(self, state: dict[str, Any]) -> None:
        from apiresource.storage.codec import ResourceCodec

        Resource.__init__(self)
        ResourceCodec().restore_into(self, state)

    # Identity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self.id == other.id and self.resource_type == other.resource_type

    def __hash__(self) -> int:
        return hash((self.resource_type, self.id))

    def __repr__(self) -> str:
        return f"{self.resource_type}({self.id!r}, {self.location!r})"


def _delegates_dirtiness(value: Any) -> bool:
    # A to-one value may itself be a Resource, whose is_dirty is a method.
    return not isinstance(value, Resource) and isinstance(value, ResolvedCollection)


@overload
def resource(cls: type[Resource]) -> type[Resource]: ...


@overload
def resource(
    cls: None = None, *, registry: ResourceRegistry | None = None
) -> Callable[[type[Resource]], type[Resource]]: ...


def resource(
    cls: type[Resource] | None = None, *, registry: ResourceRegistry | None = None
) -> type[Resource] | Callable[[type[Resource]], type[Resource]]:
    """Register a Resource subclass under its resource_type.

    Supports three forms:
        @resource                         # bare decorator
        @resource()                       # parenthesized, no args
        @resource(registry=my_registry)   # custom registry

    Args:
        cls: The class to register, or None if called with arguments.
        registry: Registry to use instead of the global one.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If the class is not a Resource subclass or lacks a
            string resource_type.
    """

    def decorator(c: type[Resource]) -> type[Resource]:
        if not (isinstance(c, type) and issubclass(c, Resource)):
            raise TypeError(f"{c!r} must subclass Resource to be registered")
        if not isinstance(getattr(c, "resource_type", None), str) or not c.resource_type:
            raise TypeError(f"Resource {c.__name__} must define a non-empty resource_type")
        return (registry or _registry).register(c)

    if cls is None:
        return decorator
    return decorator(cls)
