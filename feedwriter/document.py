"""Shared XML document context for a feed.

Every entity of a feed creates its elements through the same
:class:`Document`, so namespace prefixes resolve identically across the
whole tree.
"""

from typing import Any, Mapping

from lxml import etree

from feedwriter.exceptions import UnknownNamespace

MEDIA_NAMESPACE = "http://search.yahoo.com/mrss/"

# Prefixes declared on the <rss> root of every feed
NAMESPACES = {
    "media": MEDIA_NAMESPACE,
}

RSS_VERSION = "2.0"


class Document:
    """Element factory and serializer bound to a set of namespace prefixes."""

    def __init__(self, namespaces: Mapping[str, str] | None = None):
        self.nsmap: dict[str, str] = dict(NAMESPACES)
        if namespaces:
            self.nsmap.update(namespaces)

    def register_namespace(self, prefix: str, uri: str) -> None:
        """Declare an additional prefix on the root element."""
        self.nsmap[prefix] = uri

    def qualify(self, qname: str) -> str:
        """Convert a ``prefix:local`` name into lxml's ``{uri}local`` form.

        Raises:
            UnknownNamespace: If the prefix has not been registered
        """
        prefix, _, local = qname.rpartition(":")
        if not prefix:
            return local
        try:
            uri = self.nsmap[prefix]
        except KeyError:
            raise UnknownNamespace(prefix) from None
        return f"{{{uri}}}{local}"

    def create_element(
        self,
        qname: str,
        value: Any = None,
        attributes: Mapping[str, Any] | None = None,
        cdata: bool = False,
    ) -> etree._Element:
        """Create a detached element.

        Args:
            qname: Element name, optionally prefixed (``media:title``)
            value: Text content; ``None`` leaves the element empty
            attributes: Attributes in emission order; ``None`` values are skipped
            cdata: Wrap the text in a CDATA section instead of escaping it

        Returns:
            The new element
        """
        prefix = qname.rpartition(":")[0]
        nsmap = {prefix: self.nsmap[prefix]} if prefix in self.nsmap else None
        element = etree.Element(self.qualify(qname), nsmap=nsmap)

        for name, attr_value in (attributes or {}).items():
            if attr_value is not None:
                element.set(name, str(attr_value))

        if value is not None:
            element.text = etree.CDATA(str(value)) if cdata else str(value)

        return element

    def create_root(self) -> etree._Element:
        """Create the ``<rss>`` root declaring every registered namespace."""
        root = etree.Element("rss", nsmap=dict(self.nsmap))
        root.set("version", RSS_VERSION)
        return root

    def serialize(
        self,
        root: etree._Element,
        pretty_print: bool = False,
        encoding: str = "utf-8",
        xml_declaration: bool = True,
    ) -> bytes | str:
        """Serialize a tree, hoisting namespace declarations to the root.

        Returns text instead of bytes when ``encoding`` is ``"unicode"``.
        """
        etree.cleanup_namespaces(
            root, top_nsmap=self.nsmap, keep_ns_prefixes=list(self.nsmap)
        )
        return etree.tostring(
            root,
            pretty_print=pretty_print,
            encoding=encoding,
            xml_declaration=xml_declaration,
        )
