"""Media RSS thumbnail."""

from typing import Self

from lxml import etree
from pydantic import validate_call

from feedwriter.entities.base import Entity
from feedwriter.traits import Dimensions, Url


class Thumbnail(Entity):
    """An image representing a media object (``<media:thumbnail>``)."""

    def __init__(self, feed):
        super().__init__(feed)
        self._url = Url()
        self._dimensions = Dimensions()
        self._time: str | None = None

    def url(self, url: str) -> Self:
        self._url.value = url
        return self

    def width(self, width: int) -> Self:
        self._dimensions.width = width
        return self

    def height(self, height: int) -> Self:
        self._dimensions.height = height
        return self

    def dimensions(self, width: int, height: int) -> Self:
        self._dimensions = Dimensions(width=width, height=height)
        return self

    @validate_call
    def time(self, time: str) -> Self:
        """Set the time offset into the media, in NTP format (``12:05:01.123``)."""
        self._time = time
        return self

    def element(self) -> etree._Element:
        thumbnail = self.create_element("media:thumbnail")
        self._url.apply(self, thumbnail, required=True)
        self._dimensions.apply(thumbnail)
        if self._time is not None:
            thumbnail.set("time", self._time)
        return thumbnail
