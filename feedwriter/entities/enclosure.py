"""RSS enclosure."""

from typing import Self

from lxml import etree
from pydantic import validate_call

from feedwriter.entities.base import Entity
from feedwriter.traits import Url


class Enclosure(Entity):
    """A media file attached to an item (``<enclosure>``).

    RSS 2.0 expects url, length and type on every enclosure; each is only
    emitted once set.
    """

    def __init__(self, feed):
        super().__init__(feed)
        self._url = Url()
        self._length: int | None = None
        self._type: str | None = None

    def url(self, url: str) -> Self:
        self._url.value = url
        return self

    @validate_call
    def length(self, length: int) -> Self:
        """Set the size of the file in bytes."""
        self._length = length
        return self

    @validate_call
    def type(self, type: str) -> Self:
        """Set the MIME type."""
        self._type = type
        return self

    def element(self) -> etree._Element:
        enclosure = self.create_element("enclosure")
        self._url.apply(self, enclosure)
        if self._length is not None:
            enclosure.set("length", str(self._length))
        if self._type is not None:
            enclosure.set("type", self._type)
        return enclosure
