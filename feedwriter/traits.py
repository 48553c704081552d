"""Field bundles shared by unrelated entity types.

Each trait is a small pydantic model held by the entities that use it.
The entity's setters assign to the trait (assignment is validated) and
``element()`` asks the trait to contribute its attributes or children.
"""

import logging
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import TYPE_CHECKING, Literal

from lxml import etree
from pydantic import BaseModel, ConfigDict

from feedwriter.exceptions import MissingRequiredField

if TYPE_CHECKING:
    from feedwriter.entities.base import Entity

logger = logging.getLogger(__name__)

ContentType = Literal["plain", "html"]

HTML = "html"


def format_date(value: datetime) -> str:
    """Format a datetime the way RSS 2.0 expects (RFC 2822).

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value)


class Trait(BaseModel):
    """Base for trait state; assignments are validated like construction."""

    model_config = ConfigDict(validate_assignment=True)


class Url(Trait):
    """A single URL, emitted as the ``url`` attribute."""

    value: str | None = None

    def apply(self, entity: "Entity", element: etree._Element, required: bool = False) -> None:
        """Set the ``url`` attribute on the owner's element.

        Raises:
            MissingRequiredField: If ``required`` and no URL was set
        """
        if self.value is None:
            if required:
                logger.warning(f"{type(entity).__name__} has no url; refusing to serialize")
                raise MissingRequiredField(type(entity).__name__, "url")
            return
        element.set("url", self.value)


class Dimensions(Trait):
    """Optional width and height, each emitted independently."""

    width: int | None = None
    height: int | None = None

    def apply(self, element: etree._Element) -> None:
        if self.width is not None:
            element.set("width", str(self.width))
        if self.height is not None:
            element.set("height", str(self.height))


class TitleAndDescription(Trait):
    """Title and description, each with its own plain/html flag."""

    title: str | None = None
    title_type: ContentType | None = None
    description: str | None = None
    description_type: ContentType | None = None

    def set_title(self, title: str, type: ContentType | None = None) -> None:
        # Validate both before storing either
        self.model_validate({"title": title, "title_type": type})
        self.title = title
        self.title_type = type

    def set_description(self, description: str, type: ContentType | None = None) -> None:
        self.model_validate({"description": description, "description_type": type})
        self.description = description
        self.description_type = type

    def append_to(
        self,
        entity: "Entity",
        element: etree._Element,
        prefix: str = "",
        type_attribute: bool = False,
    ) -> None:
        """Append title and description children to ``element``.

        Args:
            entity: The owning entity (provides element creation)
            element: Parent element
            prefix: Qualified-name prefix including the colon, e.g. ``media:``
            type_attribute: Emit the ``type`` attribute when a type was given
        """
        for name, text, content_type in (
            ("title", self.title, self.title_type),
            ("description", self.description, self.description_type),
        ):
            if text is None:
                continue
            attributes = {"type": content_type} if type_attribute else None
            element.append(
                entity.create_element(
                    f"{prefix}{name}", text, attributes, cdata=content_type == HTML
                )
            )


class Link(Trait):
    """Optional link, emitted as a ``<link>`` child."""

    value: str | None = None

    def append_to(self, entity: "Entity", element: etree._Element) -> None:
        if self.value is not None:
            element.append(entity.create_element("link", self.value))


class PublishedDate(Trait):
    """Optional publication date, emitted as ``<pubDate>``."""

    value: datetime | None = None

    def append_to(self, entity: "Entity", element: etree._Element) -> None:
        if self.value is not None:
            element.append(entity.create_element("pubDate", format_date(self.value)))
