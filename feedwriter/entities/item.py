"""RSS item."""

from datetime import datetime
from typing import Self

from lxml import etree
from pydantic import validate_call

from feedwriter.entities.base import Entity
from feedwriter.entities.enclosure import Enclosure
from feedwriter.entities.media import Media, MediaGroup
from feedwriter.traits import ContentType, Link, PublishedDate, TitleAndDescription


class Item(Entity):
    """A single ``<item>`` of the channel.

    Children are emitted in this order: title, description, link, pubDate,
    guid, enclosures, media objects, media groups.
    """

    def __init__(self, feed):
        super().__init__(feed)
        self._text = TitleAndDescription()
        self._link = Link()
        self._published = PublishedDate()

        self._guid: str | None = None
        self._guid_is_permalink = False

        self._enclosures: list[Enclosure] = []
        self._media: list[Media] = []
        self._media_groups: list[MediaGroup] = []

    def title(self, title: str, type: ContentType | None = None) -> Self:
        """Set the title; ``type="html"`` writes it as CDATA."""
        self._text.set_title(title, type)
        return self

    def description(self, description: str, type: ContentType | None = None) -> Self:
        """Set the description; ``type="html"`` writes it as CDATA."""
        self._text.set_description(description, type)
        return self

    def link(self, link: str) -> Self:
        self._link.value = link
        return self

    def published_date(self, published: datetime) -> Self:
        self._published.value = published
        return self

    pub_date = published_date

    @validate_call
    def guid(self, guid: str, is_permalink: bool = False) -> Self:
        """Set the GUID; ``is_permalink`` marks it as the item's permanent URL."""
        self._guid = guid
        self._guid_is_permalink = is_permalink
        return self

    def add_enclosure(self) -> Enclosure:
        enclosure = self._create_entity(Enclosure)
        self._enclosures.append(enclosure)
        return enclosure

    def add_media(self) -> Media:
        media = self._create_entity(Media)
        self._media.append(media)
        return media

    def add_media_group(self) -> MediaGroup:
        group = self._create_entity(MediaGroup)
        self._media_groups.append(group)
        return group

    def element(self) -> etree._Element:
        item = self.create_element("item")

        self._text.append_to(self, item)
        self._link.append_to(self, item)
        self._published.append_to(self, item)

        if self._guid is not None:
            attributes = {"isPermaLink": "true"} if self._guid_is_permalink else None
            item.append(self.create_element("guid", self._guid, attributes))

        for child in (*self._enclosures, *self._media, *self._media_groups):
            item.append(child.element())

        return item
