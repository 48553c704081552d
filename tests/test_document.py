"""Tests for the shared document context."""

import pytest
from lxml import etree

from feedwriter.document import MEDIA_NAMESPACE, Document
from feedwriter.exceptions import UnknownNamespace

ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"


@pytest.fixture
def document():
    return Document()


class TestQualify:
    """Tests for qualified name resolution."""

    def test_unprefixed_name_is_unchanged(self, document):
        """Names without a prefix should be left alone."""
        assert document.qualify("item") == "item"

    def test_media_prefix_resolves(self, document):
        """The media prefix should resolve to the Media RSS namespace."""
        assert document.qualify("media:content") == f"{{{MEDIA_NAMESPACE}}}content"

    def test_unknown_prefix_raises(self, document):
        """Undeclared prefixes should raise UnknownNamespace."""
        with pytest.raises(UnknownNamespace) as exc_info:
            document.qualify("itunes:author")
        assert exc_info.value.prefix == "itunes"

    def test_registered_prefix_resolves(self, document):
        """Registered prefixes should be usable afterwards."""
        document.register_namespace("itunes", ITUNES_NAMESPACE)
        assert document.qualify("itunes:author") == f"{{{ITUNES_NAMESPACE}}}author"

    def test_constructor_namespaces(self):
        """Extra namespaces passed at construction should be registered."""
        document = Document({"itunes": ITUNES_NAMESPACE})
        assert document.nsmap == {"media": MEDIA_NAMESPACE, "itunes": ITUNES_NAMESPACE}


class TestCreateElement:
    """Tests for element creation."""

    def test_empty_element(self, document):
        """An element without value or attributes should be empty."""
        element = document.create_element("channel")
        assert element.tag == "channel"
        assert element.text is None
        assert len(element.attrib) == 0

    def test_attributes_are_stringified_in_order(self, document):
        """Attributes should be converted to str and keep their order."""
        element = document.create_element(
            "enclosure", attributes={"url": "http://x/e.mp3", "length": 1000, "type": "audio/mpeg"}
        )
        assert list(element.attrib.items()) == [
            ("url", "http://x/e.mp3"),
            ("length", "1000"),
            ("type", "audio/mpeg"),
        ]

    def test_none_attributes_are_skipped(self, document):
        """Attributes with a None value should not be emitted."""
        element = document.create_element("media:hash", "abc", {"algo": None})
        assert "algo" not in element.attrib

    def test_text_is_escaped(self, document):
        """Plain text content should be entity-escaped on output."""
        element = document.create_element("title", "Fish & <Chips>")
        assert etree.tostring(element) == b"<title>Fish &amp; &lt;Chips&gt;</title>"

    def test_cdata_text_is_not_escaped(self, document):
        """CDATA content should be written verbatim."""
        element = document.create_element("description", "<p>Hi</p>", cdata=True)
        assert etree.tostring(element) == b"<description><![CDATA[<p>Hi</p>]]></description>"

    def test_namespaced_element(self, document):
        """Prefixed elements should be created in the right namespace."""
        element = document.create_element("media:title", "Hello")
        assert etree.QName(element).namespace == MEDIA_NAMESPACE
        assert etree.QName(element).localname == "title"
        assert element.prefix == "media"


class TestSerialize:
    """Tests for root creation and serialization."""

    def test_root_declares_namespaces(self, document):
        """The rss root should declare version and every namespace."""
        root = document.create_root()
        assert root.tag == "rss"
        assert root.get("version") == "2.0"
        assert root.nsmap == {"media": MEDIA_NAMESPACE}

    def test_unused_namespaces_are_kept(self, document):
        """Registered namespaces should survive cleanup even when unused."""
        document.register_namespace("itunes", ITUNES_NAMESPACE)
        output = document.serialize(document.create_root())

        parsed = etree.fromstring(output)
        assert parsed.nsmap == {"media": MEDIA_NAMESPACE, "itunes": ITUNES_NAMESPACE}

    def test_nested_declarations_move_to_root(self, document):
        """Namespace declarations should live on the root only."""
        root = document.create_root()
        channel = document.create_element("channel")
        item = document.create_element("item")
        item.append(document.create_element("media:content", attributes={"url": "http://x/a"}))
        channel.append(item)
        root.append(channel)

        output = document.serialize(root, xml_declaration=False)

        assert output.count(b"xmlns:media") == 1

    def test_xml_declaration(self, document):
        """Byte output should start with an XML declaration by default."""
        output = document.serialize(document.create_root())
        assert output.startswith(b"<?xml version='1.0' encoding='utf-8'?>")

    def test_unicode_output(self, document):
        """Unicode encoding should produce text."""
        output = document.serialize(
            document.create_root(), encoding="unicode", xml_declaration=False
        )
        assert isinstance(output, str)
        assert output.startswith("<rss")
