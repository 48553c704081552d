"""Tests for entities without children: thumbnail, credit, text, restriction, price, enclosure."""

from decimal import Decimal

import pytest
from lxml import etree
from pydantic import ValidationError

from feedwriter.document import MEDIA_NAMESPACE
from feedwriter.entities import Relationship, RestrictionType
from feedwriter.exceptions import MissingRequiredField
from feedwriter.feed import Feed

M = f"{{{MEDIA_NAMESPACE}}}"


@pytest.fixture
def media():
    """A media object to attach leaf entities to."""
    return Feed().add_item().add_media().url("http://x/a.mp4")


class TestThumbnail:
    """Tests for Thumbnail."""

    def test_all_fields(self, media):
        """All set fields should be emitted in order."""
        thumbnail = (
            media.add_thumbnail()
            .url("http://x/t.jpg")
            .width(75)
            .height(50)
            .time("12:05:01.123")
        )
        element = thumbnail.element()

        assert element.tag == f"{M}thumbnail"
        assert list(element.attrib.items()) == [
            ("url", "http://x/t.jpg"),
            ("width", "75"),
            ("height", "50"),
            ("time", "12:05:01.123"),
        ]

    def test_url_only(self, media):
        """Unset optional fields should be absent."""
        element = media.add_thumbnail().url("http://x/t.jpg").element()
        assert dict(element.attrib) == {"url": "http://x/t.jpg"}

    def test_dimensions_setter(self, media):
        """dimensions() should set width and height together."""
        element = media.add_thumbnail().url("http://x/t.jpg").dimensions(320, 240).element()
        assert element.get("width") == "320"
        assert element.get("height") == "240"

    def test_missing_url_fails(self, media):
        """Serializing a thumbnail without a url should fail."""
        thumbnail = media.add_thumbnail().width(75)
        with pytest.raises(MissingRequiredField) as exc_info:
            thumbnail.element()
        assert exc_info.value.entity == "Thumbnail"

    def test_invalid_width(self, media):
        """Non-numeric widths should be rejected at configuration."""
        with pytest.raises(ValidationError):
            media.add_thumbnail().width("wide")


class TestCredit:
    """Tests for Credit."""

    def test_all_fields(self, media):
        """Role and scheme are attributes, the value is text content."""
        element = media.add_credit().role("producer").scheme("urn:ebu").value("Jane Doe").element()

        assert element.tag == f"{M}credit"
        assert list(element.attrib.items()) == [("role", "producer"), ("scheme", "urn:ebu")]
        assert element.text == "Jane Doe"

    def test_name_alias(self, media):
        """name() should set the same value as value()."""
        element = media.add_credit().name("John Smith").element()
        assert element.text == "John Smith"
        assert len(element.attrib) == 0


class TestText:
    """Tests for Text (transcripts)."""

    def test_plain_text(self, media):
        """Attributes should be emitted in order, content escaped."""
        element = (
            media.add_text()
            .type("plain")
            .lang("en")
            .start("00:00:03.000")
            .end("00:00:10.000")
            .content("Oh, say <can> you see")
            .element()
        )

        assert element.tag == f"{M}text"
        assert list(element.attrib) == ["type", "lang", "start", "end"]
        assert b"Oh, say &lt;can&gt; you see" in etree.tostring(element)

    def test_html_text_uses_cdata(self, media):
        """HTML transcripts should be written as CDATA."""
        element = media.add_text().type("html").content("<b>Hello</b>").element()
        assert b"<![CDATA[<b>Hello</b>]]>" in etree.tostring(element)

    def test_invalid_type(self, media):
        """Only plain and html are accepted."""
        with pytest.raises(ValidationError):
            media.add_text().type("rtf")


class TestRestriction:
    """Tests for Restriction."""

    def test_country_restriction(self, media):
        """Relationship and type are attributes, the list is text content."""
        element = (
            media.add_restriction().relationship("allow").type("country").value("au us").element()
        )

        assert element.tag == f"{M}restriction"
        assert list(element.attrib.items()) == [("relationship", "allow"), ("type", "country")]
        assert element.text == "au us"

    def test_accepts_enum_members(self, media):
        """Enum members should be accepted as well as strings."""
        element = (
            media.add_restriction()
            .relationship(Relationship.DENY)
            .type(RestrictionType.SHARING)
            .element()
        )
        assert element.get("relationship") == "deny"
        assert element.get("type") == "sharing"

    def test_invalid_relationship(self, media):
        """Unknown relationships should be rejected."""
        restriction = media.add_restriction()
        with pytest.raises(ValidationError):
            restriction.relationship("maybe")
        assert "relationship" not in restriction.element().attrib


class TestPrice:
    """Tests for Price."""

    def test_all_fields(self, media):
        """All fields should be attributes in order."""
        element = (
            media.add_price()
            .type("rent")
            .price("19.99")
            .currency("EUR")
            .info("http://x/pricing")
            .element()
        )

        assert element.tag == f"{M}price"
        assert list(element.attrib.items()) == [
            ("type", "rent"),
            ("price", "19.99"),
            ("currency", "EUR"),
            ("info", "http://x/pricing"),
        ]

    def test_decimal_price(self, media):
        """Decimal prices should keep their precision."""
        element = media.add_price().price(Decimal("5.50")).element()
        assert element.get("price") == "5.50"

    def test_empty_price(self, media):
        """A price with nothing set should have no attributes."""
        element = media.add_price().element()
        assert len(element.attrib) == 0


class TestEnclosure:
    """Tests for Enclosure."""

    def test_all_fields(self):
        """url, length and type should be emitted in that order."""
        enclosure = (
            Feed().add_item().add_enclosure().url("http://x/e.mp3").length(1000).type("audio/mpeg")
        )

        assert etree.tostring(enclosure.element()) == (
            b'<enclosure url="http://x/e.mp3" length="1000" type="audio/mpeg"/>'
        )

    def test_unset_fields_are_omitted(self):
        """Unset fields should not produce empty attributes."""
        element = Feed().add_item().add_enclosure().url("http://x/e.mp3").element()
        assert dict(element.attrib) == {"url": "http://x/e.mp3"}

    def test_invalid_length(self):
        """Lengths must be integers."""
        with pytest.raises(ValidationError):
            Feed().add_item().add_enclosure().length("big")
