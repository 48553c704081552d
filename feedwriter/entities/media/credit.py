"""Media RSS credit."""

from typing import Self

from lxml import etree
from pydantic import validate_call

from feedwriter.entities.base import Entity


class Credit(Entity):
    """Someone involved in creating a media object (``<media:credit>``)."""

    def __init__(self, feed):
        super().__init__(feed)
        self._role: str | None = None
        self._scheme: str | None = None
        self._value: str | None = None

    @validate_call
    def role(self, role: str) -> Self:
        """Set the role, e.g. ``producer`` or ``actor``."""
        self._role = role
        return self

    @validate_call
    def scheme(self, scheme: str) -> Self:
        """Set the URI identifying the role scheme, e.g. ``urn:ebu``."""
        self._scheme = scheme
        return self

    @validate_call
    def value(self, value: str) -> Self:
        """Set the name of the credited entity."""
        self._value = value
        return self

    name = value

    def element(self) -> etree._Element:
        return self.create_element(
            "media:credit",
            self._value,
            {"role": self._role, "scheme": self._scheme},
        )
