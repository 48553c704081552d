"""Feed entities: items and everything an item can contain."""

from feedwriter.entities.base import Entity
from feedwriter.entities.enclosure import Enclosure
from feedwriter.entities.item import Item
from feedwriter.entities.media import (
    Credit,
    Expression,
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

__all__ = [
    "Credit",
    "Enclosure",
    "Entity",
    "Expression",
    "Item",
    "Media",
    "MediaGroup",
    "Medium",
    "Price",
    "Relationship",
    "Restriction",
    "RestrictionType",
    "Text",
    "Thumbnail",
]
