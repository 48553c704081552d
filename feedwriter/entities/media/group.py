"""Media RSS group of alternative renditions."""

from lxml import etree

from feedwriter.entities.base import Entity
from feedwriter.entities.media.media import Media


class MediaGroup(Entity):
    """Alternative renditions of the same media (``<media:group>``).

    Members are full :class:`Media` objects, typically differing in bitrate,
    format or size; one of them may be flagged with ``is_default()``.
    """

    def __init__(self, feed):
        super().__init__(feed)
        self._media: list[Media] = []

    def add_media(self) -> Media:
        media = self._create_entity(Media)
        self._media.append(media)
        return media

    def element(self) -> etree._Element:
        group = self.create_element("media:group")
        for media in self._media:
            group.append(media.element())
        return group
