"""Tests for LinkedResourceCollection link tracking."""

import pytest

from apiresource import LinkedResourceCollection, RelationshipData, ResolvedCollection, ResourceIdentifier


@pytest.fixture
def people(person_cls):
    return [person_cls(str(i)) for i in range(3)]


def test_satisfies_resolved_collection_protocol():
    assert isinstance(LinkedResourceCollection(), ResolvedCollection)


def test_append_existing_stays_clean(people):
    collection = LinkedResourceCollection()

    for person in people:
        collection.append_existing(person)

    assert collection.is_loaded
    assert not collection.is_dirty
    assert list(collection) == people


def test_link_and_unlink_are_tracked(people):
    collection = LinkedResourceCollection(people[:2])

    collection.link(people[2])
    collection.unlink(people[0])

    assert collection.is_dirty
    assert collection.added == [people[2]]
    assert collection.removed == [people[0]]
    assert list(collection) == [people[1], people[2]]


def test_link_then_unlink_cancels(people):
    collection = LinkedResourceCollection()

    collection.link(people[0])
    collection.unlink(people[0])

    assert not collection.is_dirty
    assert len(collection) == 0


def test_unlink_then_link_cancels(people):
    collection = LinkedResourceCollection(people)

    collection.unlink(people[1])
    collection.link(people[1])

    assert not collection.is_dirty
    assert people[1] in collection


def test_membership_is_by_identity(person_cls):
    """Unsaved resources compare equal, so they must be tracked by identity."""
    first, second = person_cls(), person_cls()
    collection = LinkedResourceCollection()

    collection.link(first)
    collection.link(second)

    assert len(collection) == 2
    assert collection.added == [first, second]


def test_mark_clean(people):
    collection = LinkedResourceCollection()
    collection.link(people[0])

    collection.mark_clean()

    assert not collection.is_dirty
    assert list(collection) == [people[0]]


def test_from_relationship_data_carries_links():
    data = RelationshipData(self_link="/self", related_link="/related")

    collection = LinkedResourceCollection.from_relationship_data(data)

    assert collection.self_link == "/self"
    assert collection.related_link == "/related"
    assert not collection.is_loaded
    assert len(collection) == 0


def test_to_relationship_data_skips_unsaved(person_cls):
    collection = LinkedResourceCollection([person_cls("9"), person_cls()], related_link="/r")

    data = collection.to_relationship_data()

    assert data == RelationshipData(
        related_link="/r", identifiers=(ResourceIdentifier(type="people", id="9"),)
    )
