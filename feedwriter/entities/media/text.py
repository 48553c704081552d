"""Media RSS text (transcripts and captions)."""

from typing import Self

from lxml import etree
from pydantic import validate_call

from feedwriter.entities.base import Entity
from feedwriter.traits import HTML, ContentType


class Text(Entity):
    """A timed piece of text for a media object (``<media:text>``)."""

    def __init__(self, feed):
        super().__init__(feed)
        self._type: ContentType | None = None
        self._lang: str | None = None
        self._start: str | None = None
        self._end: str | None = None
        self._content: str | None = None

    @validate_call
    def type(self, type: ContentType) -> Self:
        self._type = type
        return self

    @validate_call
    def lang(self, lang: str) -> Self:
        self._lang = lang
        return self

    language = lang

    @validate_call
    def start(self, start: str) -> Self:
        self._start = start
        return self

    @validate_call
    def end(self, end: str) -> Self:
        self._end = end
        return self

    @validate_call
    def content(self, content: str) -> Self:
        self._content = content
        return self

    def element(self) -> etree._Element:
        return self.create_element(
            "media:text",
            self._content,
            {
                "type": self._type,
                "lang": self._lang,
                "start": self._start,
                "end": self._end,
            },
            cdata=self._type == HTML,
        )
