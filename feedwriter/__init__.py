"""feedwriter: build RSS 2.0 feeds with Media RSS content.

Typical use::

    from feedwriter import Feed

    feed = Feed()
    feed.title("Videos").link("https://example.com").description("Latest videos")
    item = feed.add_item().title("First").guid("https://example.com/1", True)
    item.add_media().url("https://example.com/1.mp4").medium("video")
    print(feed.to_string(pretty_print=True))
"""

from feedwriter.document import MEDIA_NAMESPACE, Document
from feedwriter.entities import (
    Credit,
    Enclosure,
    Entity,
    Expression,
    Item,
    Media,
    MediaGroup,
    Medium,
    Price,
    Relationship,
    Restriction,
    RestrictionType,
    Text,
    Thumbnail,
)
from feedwriter.exceptions import (
    FeedWriterError,
    InvalidExpression,
    InvalidMedium,
    MissingRequiredField,
    UnknownNamespace,
)
from feedwriter.feed import Feed

__all__ = [
    "MEDIA_NAMESPACE",
    "Credit",
    "Document",
    "Enclosure",
    "Entity",
    "Expression",
    "Feed",
    "FeedWriterError",
    "InvalidExpression",
    "InvalidMedium",
    "Item",
    "Media",
    "MediaGroup",
    "Medium",
    "MissingRequiredField",
    "Price",
    "Relationship",
    "Restriction",
    "RestrictionType",
    "Text",
    "Thumbnail",
    "UnknownNamespace",
]
