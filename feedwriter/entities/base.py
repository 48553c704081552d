"""Base class for feed entities."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, TypeVar

from lxml import etree

if TYPE_CHECKING:
    from feedwriter.feed import Feed

E = TypeVar("E", bound="Entity")


class Entity(ABC):
    """An object in the feed graph that serializes to exactly one element.

    Entities keep a reference to the feed that owns them. The reference is
    used only to reach the feed's :class:`~feedwriter.document.Document`;
    the graph is always walked downwards, from the feed to its items and
    from there to their children.
    """

    def __init__(self, feed: "Feed"):
        self._feed = feed

    def create_element(
        self,
        qname: str,
        value: Any = None,
        attributes: Mapping[str, Any] | None = None,
        cdata: bool = False,
    ) -> etree._Element:
        """Create an element through the feed's shared document."""
        return self._feed.document.create_element(qname, value, attributes, cdata)

    def _create_entity(self, cls: type[E]) -> E:
        """Instantiate a child entity bound to the same feed."""
        return cls(self._feed)

    @abstractmethod
    def element(self) -> etree._Element:
        """Build a new element representing the current state.

        Calling this repeatedly returns independent, equal trees; the entity
        itself is never modified.
        """
