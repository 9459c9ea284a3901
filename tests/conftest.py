"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from apiresource import (
    Attribute,
    Resource,
    ResourceCodec,
    ToManyRelationship,
    ToOneRelationship,
    resource,
)
from apiresource.config import CodecSettings


@resource
class FixturePerson(Resource):
    resource_type = "people"
    fields = (Attribute("name"),)


@resource
class FixtureArticle(Resource):
    resource_type = "articles"
    fields = (
        Attribute("title"),
        Attribute("body", serialized_name="content"),
        ToOneRelationship("author", linked_type="people"),
        ToManyRelationship("comments", linked_type="comments"),
    )


@pytest.fixture
def article_cls():
    return FixtureArticle


@pytest.fixture
def person_cls():
    return FixturePerson


@pytest.fixture
def loaded_article():
    """Article populated and snapshotted as if just fetched."""
    return FixtureArticle.from_payload(
        "1",
        {"title": "Hello", "body": "First post"},
        location="https://example.com/articles/1",
    )


@pytest.fixture
def codec():
    """Codec with explicit settings, independent of the environment."""
    return ResourceCodec(settings=CodecSettings(_env_file=None))
