from __future__ import annotations
"""Document loader and serializer backed by lxml.

The libxml2 HTML parser is permissive: unclosed tags and missing
<html>/<body> wrappers are tolerated and left as the parser builds them.
Unlike an HTML5 tree builder it does not imply a <head>, so an empty one is
added when the markup has none. Only input that yields no tree at all is
rejected.
"""
import logging
from pathlib import Path
from typing import Optional

import lxml.html
from lxml import etree

from htmlinliner.constants import DEFAULT_ENCODING, DOCTYPE
from htmlinliner.core.errors import DocumentLoadError
from htmlinliner.logging.helpers import get_logger, trace_io

_log = get_logger('io.document')


def load_document(html: str) -> lxml.html.HtmlElement:
    """Parse *html* into a mutable tree and return its root element."""
    # Parse bytes with an explicit codec so that <?xml encoding?> and
    # <meta charset> declarations in the markup cannot override it.
    parser = lxml.html.HTMLParser(encoding=DEFAULT_ENCODING)
    try:
        doc = lxml.html.document_fromstring(html.encode(DEFAULT_ENCODING), parser=parser)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError) as exc:
        raise DocumentLoadError(f'could not parse HTML document ({exc})') from exc
    ensure_head(doc)
    return doc


def ensure_head(doc: lxml.html.HtmlElement) -> None:
    """Insert an empty <head> as the first child of <html> when the tree has none."""
    if doc.tag != 'html' or next(doc.iter('head'), None) is not None:
        return
    doc.insert(0, doc.makeelement('head', {}))


def read_document(
        path: Path,
        *,
        encoding: str = DEFAULT_ENCODING,
        logger: Optional[logging.Logger] = None,
) -> lxml.html.HtmlElement:
    """Read *path* as text and parse it with `load_document`."""
    log = logger or _log
    try:
        raw = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f'Reading file {path} failed: {exc!r}') from exc
    trace_io(log, 'read HTML document', path=str(path), chars=len(raw))
    return load_document(raw)


def serialize_document(doc: lxml.html.HtmlElement) -> str:
    """Return the doctype line followed by the markup of *doc*."""
    return f'{DOCTYPE}\n' + lxml.html.tostring(doc, encoding='unicode', method='html')
