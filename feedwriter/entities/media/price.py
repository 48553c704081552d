"""Media RSS price."""

from decimal import Decimal
from typing import Self

from lxml import etree
from pydantic import validate_call

from feedwriter.entities.base import Entity


class Price(Entity):
    """Pricing information for a media object (``<media:price>``)."""

    def __init__(self, feed):
        super().__init__(feed)
        self._type: str | None = None
        self._price: Decimal | None = None
        self._currency: str | None = None
        self._info: str | None = None

    @validate_call
    def type(self, type: str) -> Self:
        """Set the price type: ``rent``, ``purchase``, ``package`` or ``subscription``."""
        self._type = type
        return self

    @validate_call
    def price(self, price: Decimal) -> Self:
        self._price = price
        return self

    @validate_call
    def currency(self, currency: str) -> Self:
        """Set the ISO 4217 currency code."""
        self._currency = currency
        return self

    @validate_call
    def info(self, info: str) -> Self:
        """Set a URL with further pricing details."""
        self._info = info
        return self

    def element(self) -> etree._Element:
        return self.create_element(
            "media:price",
            attributes={
                "type": self._type,
                "price": self._price,
                "currency": self._currency,
                "info": self._info,
            },
        )
