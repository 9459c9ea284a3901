"""Resource base class, registry, decorator and dirty tracking.

Usage:
    @resource
    class Article(Resource):
        resource_type = "articles"
        fields = (Attribute("title"), ToOneRelationship("author", linked_type="people"))

    article = Article.from_payload("1", {"title": "Hello"})
    article.title = "Hello again"
    assert article.is_dirty("title")
"""

from apiresource.core.resource.core import (
    Resource,
    ResourceRegistry,
    get_registry,
    resource,
)
from apiresource.core.resource.models import NULL, UnknownFieldError

__all__ = [
    "Resource",
    "ResourceRegistry",
    "get_registry",
    "resource",
    "NULL",
    "UnknownFieldError",
]
