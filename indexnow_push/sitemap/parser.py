# File: indexnow_push/sitemap/parser.py
"""indexnow_push.sitemap.parser: classification and parsing of sitemap XML.

Two document shapes are recognised, both matched by local element name on the
direct children of the root element, whatever the namespace:

* sitemap index – ``<sitemap><loc>…</loc></sitemap>`` entries;
* URL set – ``<url><loc>…</loc></url>`` entries.

Example:
```python
from indexnow_push.sitemap.parser import classify

doc = classify(open("sitemap.xml", "rb").read())
```
"""

from __future__ import annotations

from typing import List, Union

from lxml import etree

from indexnow_push.sitemap.models import SitemapIndexDoc, URLSetDoc

__all__ = [
    "SitemapSyntaxError",
    "classify",
    "parse_sitemap_index",
    "parse_urlset",
]


class SitemapSyntaxError(ValueError):
    """The document is not well-formed XML."""


def _xml_parser(recover: bool) -> etree.XMLParser:
    return etree.XMLParser(
        ns_clean=True,
        recover=recover,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
    )


def _parse_root(content: bytes) -> etree._Element:
    """Parse the first root element of *content*.

    Whitespace before the XML declaration and anything after a complete root
    element are ignored; every other syntax error is fatal.
    """
    content = content.lstrip()
    try:
        return etree.fromstring(content, parser=_xml_parser(recover=False))
    except etree.XMLSyntaxError as exc:
        # The root closed cleanly, only trailing junk follows it.
        if exc.code == etree.ErrorTypes.ERR_DOCUMENT_END:
            return etree.fromstring(content, parser=_xml_parser(recover=True))
        raise SitemapSyntaxError(str(exc)) from exc


def _locations(root: etree._Element, entry_name: str) -> List[str]:
    """Collect the ``<loc>`` text of every direct ``<entry_name>`` child of *root*."""
    locs: List[str] = []
    for entry in root:
        if not isinstance(entry.tag, str) or etree.QName(entry).localname != entry_name:
            continue
        for child in entry:
            if isinstance(child.tag, str) and etree.QName(child).localname == "loc":
                if child.text and child.text.strip():
                    locs.append(child.text.strip())
                break
    return locs


def parse_sitemap_index(content: bytes) -> SitemapIndexDoc:
    """Decode *content* as a sitemap index; the result may be empty."""
    return SitemapIndexDoc(tuple(_locations(_parse_root(content), "sitemap")))


def parse_urlset(content: bytes) -> URLSetDoc:
    """Decode *content* as a URL set; the result may be empty."""
    return URLSetDoc(tuple(_locations(_parse_root(content), "url")))


def classify(content: bytes) -> Union[SitemapIndexDoc, URLSetDoc]:
    """Return the index form of *content* if it lists sitemaps, else its URL-set form.

    A document with at least one ``<sitemap>`` entry is an index even when it
    also carries ``<url>`` entries. Malformed XML raises
    :class:`SitemapSyntaxError`.
    """
    index = parse_sitemap_index(content)
    if index.sitemaps:
        return index
    return parse_urlset(content)
