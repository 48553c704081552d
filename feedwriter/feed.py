"""RSS 2.0 feed: the root of the entity graph."""

import logging
from datetime import datetime
from typing import Mapping, Self

from lxml import etree
from pydantic import validate_call

from feedwriter.config import Settings, get_settings
from feedwriter.document import Document
from feedwriter.entities.item import Item
from feedwriter.traits import ContentType, Link, PublishedDate, TitleAndDescription, format_date

logger = logging.getLogger(__name__)


class Feed:
    """An RSS 2.0 channel and the items it contains.

    The feed owns the shared :class:`Document` every entity creates its
    elements through, and the ordered list of items. Items are only created
    through :meth:`add_item`; serialization order is insertion order.

    Example:
        feed = Feed()
        feed.title("Episodes").link("https://example.com").description("All episodes")
        item = feed.add_item().title("Episode 1").guid("ep-1")
        item.add_enclosure().url("https://example.com/1.mp3").length(1000).type("audio/mpeg")
        xml = feed.to_string()
    """

    def __init__(
        self,
        namespaces: Mapping[str, str] | None = None,
        settings: Settings | None = None,
    ):
        """Initialize an empty feed.

        Args:
            namespaces: Extra prefix to URI mappings declared on the root,
                in addition to ``media``
            settings: Serialization settings; defaults to ``get_settings()``
        """
        self.document = Document(namespaces)
        self.settings = settings or get_settings()

        self._text = TitleAndDescription()
        self._link = Link()
        self._published = PublishedDate()
        self._language: str | None = None
        self._copyright: str | None = None
        self._generator: str | None = self.settings.generator or None
        self._last_build_date: datetime | None = None
        self._ttl: int | None = None

        self._items: list[Item] = []

    @property
    def items(self) -> tuple[Item, ...]:
        """The items, in insertion order."""
        return tuple(self._items)

    def title(self, title: str, type: ContentType | None = None) -> Self:
        self._text.set_title(title, type)
        return self

    def description(self, description: str, type: ContentType | None = None) -> Self:
        self._text.set_description(description, type)
        return self

    def link(self, link: str) -> Self:
        self._link.value = link
        return self

    def published_date(self, published: datetime) -> Self:
        self._published.value = published
        return self

    @validate_call
    def last_build_date(self, last_build_date: datetime) -> Self:
        self._last_build_date = last_build_date
        return self

    @validate_call
    def language(self, language: str) -> Self:
        """Set the language code, e.g. ``en-gb``."""
        self._language = language
        return self

    @validate_call
    def copyright(self, copyright: str) -> Self:
        self._copyright = copyright
        return self

    @validate_call
    def generator(self, generator: str | None) -> Self:
        """Override the generator name; ``None`` omits the element."""
        self._generator = generator
        return self

    @validate_call
    def ttl(self, ttl: int) -> Self:
        """Set how many minutes the feed may be cached."""
        self._ttl = ttl
        return self

    def register_namespace(self, prefix: str, uri: str) -> Self:
        self.document.register_namespace(prefix, uri)
        return self

    def add_item(self) -> Item:
        item = Item(self)
        self._items.append(item)
        return item

    def element(self) -> etree._Element:
        """Build the ``<channel>`` element with all of its items."""
        channel = self.document.create_element("channel")

        self._text.append_to(self, channel)
        self._link.append_to(self, channel)

        if self._language is not None:
            channel.append(self.create_element("language", self._language))
        if self._copyright is not None:
            channel.append(self.create_element("copyright", self._copyright))

        self._published.append_to(self, channel)

        if self._last_build_date is not None:
            channel.append(
                self.create_element("lastBuildDate", format_date(self._last_build_date))
            )
        if self._generator is not None:
            channel.append(self.create_element("generator", self._generator))
        if self._ttl is not None:
            channel.append(self.create_element("ttl", self._ttl))

        for item in self._items:
            channel.append(item.element())

        return channel

    def create_element(self, qname, value=None, attributes=None, cdata=False) -> etree._Element:
        """Create an element through the shared document."""
        return self.document.create_element(qname, value, attributes, cdata)

    def to_xml(self) -> etree._Element:
        """Build the complete ``<rss>`` tree."""
        root = self.document.create_root()
        root.append(self.element())
        logger.debug(f"Built feed with {len(self._items)} items")
        return root

    def to_bytes(
        self,
        pretty_print: bool | None = None,
        encoding: str | None = None,
        xml_declaration: bool | None = None,
    ) -> bytes:
        """Serialize the feed; arguments left as ``None`` come from settings."""
        return self.document.serialize(
            self.to_xml(),
            pretty_print=self.settings.pretty_print if pretty_print is None else pretty_print,
            encoding=encoding or self.settings.encoding,
            xml_declaration=(
                self.settings.xml_declaration if xml_declaration is None else xml_declaration
            ),
        )

    def to_string(self, pretty_print: bool | None = None) -> str:
        """Serialize the feed to text, without an XML declaration."""
        return self.document.serialize(
            self.to_xml(),
            pretty_print=self.settings.pretty_print if pretty_print is None else pretty_print,
            encoding="unicode",
            xml_declaration=False,
        )

    def __str__(self) -> str:
        return self.to_string()
