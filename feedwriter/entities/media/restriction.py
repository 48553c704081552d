"""Media RSS restriction."""

from enum import Enum
from typing import Self

from lxml import etree
from pydantic import validate_call

from feedwriter.entities.base import Entity


class Relationship(str, Enum):
    """Whether the restriction lists where the media may or may not be shown."""

    ALLOW = "allow"
    DENY = "deny"


class RestrictionType(str, Enum):
    """What the restriction's value lists."""

    COUNTRY = "country"
    URI = "uri"
    SHARING = "sharing"


class Restriction(Entity):
    """Limits where a media object may be played (``<media:restriction>``).

    ``value`` is a space separated list, e.g. ISO country codes for a
    ``country`` restriction.
    """

    def __init__(self, feed):
        super().__init__(feed)
        self._relationship: Relationship | None = None
        self._type: RestrictionType | None = None
        self._value: str | None = None

    @validate_call
    def relationship(self, relationship: Relationship) -> Self:
        self._relationship = relationship
        return self

    @validate_call
    def type(self, type: RestrictionType) -> Self:
        self._type = type
        return self

    @validate_call
    def value(self, value: str) -> Self:
        self._value = value
        return self

    def element(self) -> etree._Element:
        return self.create_element(
            "media:restriction",
            self._value,
            {
                "relationship": self._relationship.value if self._relationship else None,
                "type": self._type.value if self._type else None,
            },
        )
