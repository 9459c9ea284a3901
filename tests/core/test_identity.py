"""Tests for resource identifiers.

Critical Invariants:
- from_dict is the exact inverse of to_dict
- Equal identifiers hash equally
- Missing or mistyped keys raise MalformedIdentifierError
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from apiresource import MalformedIdentifierError, ResourceIdentifier

identifiers = st.builds(ResourceIdentifier, type=st.text(), id=st.text())


def test_decode_scenario():
    """{"type": "articles", "id": "1"} decodes and re-encodes unchanged."""
    data = {"type": "articles", "id": "1"}

    identifier = ResourceIdentifier.from_dict(data)

    assert identifier == ResourceIdentifier(type="articles", id="1")
    assert identifier.to_dict() == data


@given(identifiers)
def test_round_trip(identifier):
    """PROPERTY: decode(encode(x)) == x."""
    assert ResourceIdentifier.from_dict(identifier.to_dict()) == identifier


@given(identifiers, identifiers)
def test_hash_consistent_with_equality(a, b):
    """PROPERTY: a == b implies hash(a) == hash(b)."""
    if a == b:
        assert hash(a) == hash(b)


def test_separator_in_content_does_not_collide():
    """Identifiers differing only in where ':' falls are distinct."""
    a = ResourceIdentifier(type="a:b", id="c")
    b = ResourceIdentifier(type="a", id="b:c")

    assert a != b
    assert len({a, b}) == 2


def test_identifier_is_immutable():
    identifier = ResourceIdentifier(type="articles", id="1")

    with pytest.raises(AttributeError):
        identifier.id = "2"  # type: ignore[misc]


@pytest.mark.parametrize(
    "data",
    [
        {"type": "articles"},
        {"id": "1"},
        {},
        {"type": "articles", "id": 1},
        {"type": None, "id": "1"},
    ],
)
def test_malformed_dictionary_raises(data):
    with pytest.raises(MalformedIdentifierError):
        ResourceIdentifier.from_dict(data)


def test_non_mapping_raises():
    with pytest.raises(MalformedIdentifierError, match="must be a mapping"):
        ResourceIdentifier.from_dict(["articles", "1"])  # type: ignore[arg-type]


def test_malformed_identifier_is_value_error():
    """Callers catching ValueError also catch malformed identifiers."""
    assert issubclass(MalformedIdentifierError, ValueError)
