from __future__ import annotations
"""Content substitutor.

Replaces scanned references with the content of the files they point to.
Stylesheets are concatenated into a single <style> element appended to
<head>; scripts are rebuilt in place so their execution order relative to
sibling content is unchanged. Every removed tag leaves a comment holding its
original markup.
"""
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import lxml.html
from lxml import etree
from lxml.html import HtmlElement

from htmlinliner.core.errors import AssetReadError, DocumentStructureError, InlinerError
from htmlinliner.core.interfaces.readers import AssetReaderProtocol
from htmlinliner.core.models import CssRef, InlineContext, ScriptRef
from htmlinliner.core.report import InlineReport
from htmlinliner.io.readers import AssetReader
from htmlinliner.logging.helpers import get_logger

_log = get_logger('substitutor')


def splice_node(node: etree._Element, replacements: Sequence[etree._Element]) -> None:
    """Remove *node* and insert *replacements* in order at its position.

    lxml stores the text following an element as that element's tail, so
    the tail of *node* is handed to the last replacement (or to whatever
    precedes *node* when there are no replacements).
    """
    parent = node.getparent()
    if parent is None:
        raise ValueError('cannot splice a node without a parent')

    index = parent.index(node)
    tail = node.tail
    node.tail = None
    parent.remove(node)

    for offset, new_node in enumerate(replacements):
        parent.insert(index + offset, new_node)

    if not tail:
        return
    if replacements:
        last = replacements[-1]
        last.tail = (last.tail or '') + tail
    elif index > 0:
        prev = parent[index - 1]
        prev.tail = (prev.tail or '') + tail
    else:
        parent.text = (parent.text or '') + tail


def outer_html(node: HtmlElement) -> str:
    return lxml.html.tostring(node, encoding='unicode', method='html', with_tail=False)


def _comment_text(markup: str) -> str:
    # HTML comments cannot contain '--'.
    while '--' in markup:
        markup = markup.replace('--', '- -')
    return f' {markup} '


def replace_with_comment(node: HtmlElement, additional: Optional[HtmlElement] = None) -> etree._Comment:
    """Replace *node* with a comment of its markup, optionally followed by *additional*.

    When *additional* is given a newline separates it from the comment.
    """
    comment = etree.Comment(_comment_text(outer_html(node)))
    if additional is None:
        splice_node(node, [comment])
    else:
        comment.tail = '\n'
        splice_node(node, [comment, additional])
    return comment


def find_single_head(doc: HtmlElement) -> HtmlElement:
    heads = list(doc.iter('head'))
    if len(heads) != 1:
        raise DocumentStructureError(f'Invalid number of <head> elements: {len(heads)}')
    return heads[0]


def _byte_size(content: str) -> int:
    return len(content.encode('utf-8'))


def _set_text(element: HtmlElement, content: str, path: Path) -> None:
    try:
        element.text = content
    except ValueError as exc:
        # lxml rejects NUL and control characters that cannot live in a text node.
        raise AssetReadError(path, exc) from exc


def inline_css(
        refs: Sequence[CssRef],
        ctx: InlineContext,
        *,
        reader: Optional[AssetReaderProtocol] = None,
        logger: Optional[logging.Logger] = None,
        report: Optional[InlineReport] = None,
) -> str:
    """Replace each stylesheet link with a trace comment and return the joined CSS.

    Each file is wrapped in a leading and trailing newline so consecutive
    files end up separated by a blank line.
    """
    log = logger or _log
    reader = reader or AssetReader()
    chunks: List[str] = []
    scratch = lxml.html.Element('style')

    for ref in refs:
        content = reader.read_text(ref.absolute_path)
        _set_text(scratch, content, ref.absolute_path)
        chunks.append(f'\n{content}\n')
        replace_with_comment(ref.orig_tag)

        size = _byte_size(content)
        log.info('Inlined stylesheet %s (%d bytes)', ref.absolute_path, size)
        if report is not None:
            report.add_css(str(ref.absolute_path), size)

    return ''.join(chunks)


def append_style(ctx: InlineContext, css: str) -> HtmlElement:
    """Append a <style> holding *css* as the last child of the document's <head>."""
    head = find_single_head(ctx.doc)
    style = head.makeelement('style', {})
    try:
        style.text = css
    except ValueError as exc:
        raise InlinerError(f'Cannot embed stylesheet content: {exc}') from exc
    head.append(style)
    return style


def build_inline_script(ref: ScriptRef, content: str) -> HtmlElement:
    """Return a new <script> with *content* and every original attribute except src."""
    attrib = {name: value for name, value in ref.orig_tag.attrib.items() if name != 'src'}
    script = ref.orig_tag.makeelement('script', attrib)
    _set_text(script, content, ref.absolute_path)
    return script


def inline_scripts(
        refs: Sequence[ScriptRef],
        ctx: InlineContext,
        *,
        reader: Optional[AssetReaderProtocol] = None,
        logger: Optional[logging.Logger] = None,
        report: Optional[InlineReport] = None,
) -> None:
    """Swap each script reference for a trace comment plus an inline copy."""
    log = logger or _log
    reader = reader or AssetReader()

    for ref in refs:
        content = reader.read_text(ref.absolute_path)
        replace_with_comment(ref.orig_tag, build_inline_script(ref, content))

        size = _byte_size(content)
        log.info('Inlined script %s (%d bytes)', ref.absolute_path, size)
        if report is not None:
            report.add_script(str(ref.absolute_path), size)
