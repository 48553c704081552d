"""Media RSS entities."""

from feedwriter.entities.media.credit import Credit
from feedwriter.entities.media.group import MediaGroup
from feedwriter.entities.media.media import Expression, Media, Medium
from feedwriter.entities.media.price import Price
from feedwriter.entities.media.restriction import Relationship, Restriction, RestrictionType
from feedwriter.entities.media.text import Text
from feedwriter.entities.media.thumbnail import Thumbnail

__all__ = [
    "Credit",
    "Expression",
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
