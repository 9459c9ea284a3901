"""End-to-end journeys: load, edit, save, persist, unload, reload."""

from apiresource import LinkedResourceCollection, RelationshipData, ResourceIdentifier


def _payload_relationships():
    return {
        "author": RelationshipData.from_dict({"data": [{"type": "people", "id": "9"}]}),
        "comments": RelationshipData.from_dict(
            {"relatedURL": "https://example.com/articles/1/comments"}
        ),
    }


def test_edit_save_rebase_journey(article_cls, person_cls):
    """Loader populates, app edits, saver writes dirty fields and rebases."""
    author = person_cls.from_payload("9", {"name": "Ada"})
    article = article_cls.from_payload(
        "1",
        {"title": "Hello", "body": "First post", "author": author},
        relationships=_payload_relationships(),
    )
    comments = LinkedResourceCollection.from_relationship_data(article.relationships["comments"])
    article.set_value("comments", comments)
    assert not article.is_dirty()

    # Application edits
    article.title = "Hello, world"
    comments.link(person_cls("12"))

    to_save = [f.name for f in article.dirty_fields()]
    assert to_save == ["title", "comments"]

    # After a successful save
    for name in to_save:
        article.mark_field(name, False)
    comments.mark_clean()
    assert not article.is_dirty()


def test_force_write_of_unchanged_field(loaded_article):
    loaded_article.mark_field("body", True)

    assert [f.name for f in loaded_article.dirty_fields()] == ["body"]


def test_persist_unload_reload_journey(codec, article_cls):
    """Snapshot to bytes, restore as ghost, then reload through the loader path."""
    article = article_cls.from_payload(
        "1",
        {"title": "Hello"},
        location="https://example.com/articles/1",
        meta={"revision": 2},
        relationships=_payload_relationships(),
    )

    restored = codec.loads(codec.dumps(article))
    assert restored == article
    assert restored.relationships["author"].identifiers == (
        ResourceIdentifier(type="people", id="9"),
    )
    assert restored.is_loaded

    restored.unload()
    assert not restored.is_loaded
    assert restored.title is None
    assert restored.identifier == ResourceIdentifier(type="articles", id="1")

    # Reload repopulates fields through the snapshotting path
    restored.set_value("title", "Hello again")
    restored.is_loaded = True
    assert restored.title == "Hello again"
    assert not restored.is_dirty()
