"""Media RSS content object."""

from enum import Enum
from typing import Self

from lxml import etree
from pydantic import validate_call

from feedwriter.entities.base import Entity
from feedwriter.entities.media.credit import Credit
from feedwriter.entities.media.price import Price
from feedwriter.entities.media.restriction import Restriction
from feedwriter.entities.media.text import Text
from feedwriter.entities.media.thumbnail import Thumbnail
from feedwriter.exceptions import InvalidExpression, InvalidMedium
from feedwriter.traits import ContentType, Dimensions, TitleAndDescription, Url


class Medium(str, Enum):
    """Media RSS mediums."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    EXECUTABLE = "executable"


class Expression(str, Enum):
    """Whether the media is a sample, the full asset, or a live stream."""

    SAMPLE = "sample"
    FULL = "full"
    NONSTOP = "nonstop"


class Media(Entity):
    """A single media object (``<media:content>``).

    Scalar properties become attributes of ``<media:content>``; everything
    else (title, keywords, thumbnails, credits, ...) becomes a child
    element. Child order is fixed:

    1. title, description, keywords
    2. thumbnails, credits, texts, restrictions, prices, each in the order
       they were added
    3. player, hash, comments

    Example:
        media = item.add_media()
        media.url("https://example.com/a.mp4").medium("video").duration(120)
        media.add_thumbnail().url("https://example.com/a.jpg").width(320)
    """

    def __init__(self, feed):
        super().__init__(feed)
        self._url = Url()
        self._dimensions = Dimensions()
        self._text = TitleAndDescription()

        self._type: str | None = None
        self._medium: Medium | None = None
        self._expression: Expression | None = None
        self._is_default = False
        self._file_size: int | None = None
        self._duration: int | None = None
        self._bitrate: int | float | None = None
        self._framerate: int | float | None = None

        self._keywords: list[str] = []
        self._player: str | None = None
        self._hash: str | None = None
        self._hash_algorithm: str | None = None
        self._comments: list[str] = []

        self._thumbnails: list[Thumbnail] = []
        self._credits: list[Credit] = []
        self._texts: list[Text] = []
        self._restrictions: list[Restriction] = []
        self._prices: list[Price] = []

    def url(self, url: str) -> Self:
        """Set the URL of the media object; required for serialization."""
        self._url.value = url
        return self

    @validate_call
    def type(self, type: str) -> Self:
        """Set the MIME type, e.g. ``video/mp4``."""
        self._type = type
        return self

    def medium(self, medium: Medium | str) -> Self:
        """Set the medium.

        Raises:
            InvalidMedium: If ``medium`` is not image, video, audio,
                document or executable
        """
        try:
            self._medium = Medium(medium)
        except ValueError:
            raise InvalidMedium(str(medium)) from None
        return self

    def expression(self, expression: Expression | str) -> Self:
        """Set the expression.

        Raises:
            InvalidExpression: If ``expression`` is not sample, full or nonstop
        """
        try:
            self._expression = Expression(expression)
        except ValueError:
            raise InvalidExpression(str(expression)) from None
        return self

    @validate_call
    def is_default(self, is_default: bool = True) -> Self:
        """Flag this as the default object among several alternatives."""
        self._is_default = is_default
        return self

    @validate_call
    def file_size(self, file_size: int) -> Self:
        """Set the size in bytes."""
        self._file_size = file_size
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
    def duration(self, duration: int) -> Self:
        """Set the duration in seconds."""
        self._duration = duration
        return self

    @validate_call
    def bitrate(self, bitrate: int | float) -> Self:
        """Set the bitrate in kilobits per second."""
        self._bitrate = bitrate
        return self

    @validate_call
    def framerate(self, framerate: int | float) -> Self:
        """Set the number of frames per second."""
        self._framerate = framerate
        return self

    def title(self, title: str, type: ContentType | None = None) -> Self:
        self._text.set_title(title, type)
        return self

    def description(self, description: str, type: ContentType | None = None) -> Self:
        self._text.set_description(description, type)
        return self

    @validate_call
    def keywords(self, *keywords: str) -> Self:
        """Replace the keywords."""
        self._keywords = list(keywords)
        return self

    @validate_call
    def player(self, player: str) -> Self:
        """Set the URL of a page with an embedded player for this media."""
        self._player = player
        return self

    @validate_call
    def hash(self, hash: str, algorithm: str | None = None) -> Self:
        """Set the hash of the binary file and, optionally, its algorithm (md5, sha-1)."""
        self._hash = hash
        self._hash_algorithm = algorithm
        return self

    @validate_call
    def comments(self, *comments: str) -> Self:
        """Add one or more comments."""
        self._comments.extend(comments)
        return self

    def add_thumbnail(self) -> Thumbnail:
        thumbnail = self._create_entity(Thumbnail)
        self._thumbnails.append(thumbnail)
        return thumbnail

    def add_credit(self) -> Credit:
        credit = self._create_entity(Credit)
        self._credits.append(credit)
        return credit

    def add_text(self) -> Text:
        text = self._create_entity(Text)
        self._texts.append(text)
        return text

    def add_restriction(self) -> Restriction:
        restriction = self._create_entity(Restriction)
        self._restrictions.append(restriction)
        return restriction

    def add_price(self) -> Price:
        price = self._create_entity(Price)
        self._prices.append(price)
        return price

    def element(self) -> etree._Element:
        media = self.create_element("media:content")
        self._url.apply(self, media, required=True)

        # Attribute order matters to some consumers
        for name, value in (
            ("type", self._type),
            ("medium", self._medium.value if self._medium else None),
            ("fileSize", self._file_size),
        ):
            if value is not None:
                media.set(name, str(value))

        self._dimensions.apply(media)

        for name, value in (
            ("duration", self._duration),
            ("bitrate", self._bitrate),
            ("framerate", self._framerate),
            ("expression", self._expression.value if self._expression else None),
        ):
            if value is not None:
                media.set(name, str(value))

        if self._is_default:
            media.set("isDefault", "true")

        self._text.append_to(self, media, prefix="media:", type_attribute=True)

        if self._keywords:
            media.append(self.create_element("media:keywords", ", ".join(self._keywords)))

        for child in (
            *self._thumbnails,
            *self._credits,
            *self._texts,
            *self._restrictions,
            *self._prices,
        ):
            media.append(child.element())

        if self._player is not None:
            media.append(self.create_element("media:player", attributes={"url": self._player}))

        if self._hash is not None:
            media.append(
                self.create_element(
                    "media:hash", self._hash, {"algo": self._hash_algorithm}
                )
            )

        if self._comments:
            comments = self.create_element("media:comments")
            for comment in self._comments:
                comments.append(self.create_element("media:comment", comment))
            media.append(comments)

        return media
