from __future__ import annotations
"""Reference scanner.

Two independent passes over the same document, one for stylesheet links and
one for scripts. Each pass walks its tag in document order and returns the
references eligible for inlining. Tags carrying the ignore marker lose the
marker attribute and are never returned.
"""
import logging
from typing import List, Optional

from lxml.html import HtmlElement

from htmlinliner.constants import CSS_SUFFIX, IGNORE_ATTR, JS_SUFFIX
from htmlinliner.core.interfaces.fs import PathResolverProtocol
from htmlinliner.core.models import CssRef, InlineContext, ScriptRef
from htmlinliner.logging.helpers import get_logger
from htmlinliner.rendering.path_resolver import DefaultPathResolver
from htmlinliner.utils.paths import is_local_asset

_log = get_logger('scanner')


def consume_ignore_marker(element: HtmlElement, ignore_attr: str = IGNORE_ATTR) -> bool:
    """Strip *ignore_attr* from *element*; return True if it was present."""
    if ignore_attr not in element.attrib:
        return False
    del element.attrib[ignore_attr]
    return True


def find_css_refs(
        ctx: InlineContext,
        *,
        ignore_attr: str = IGNORE_ATTR,
        resolver: Optional[PathResolverProtocol] = None,
        logger: Optional[logging.Logger] = None,
) -> List[CssRef]:
    """Return every `<link rel="stylesheet" href="*.css">` with a local href."""
    log = logger or _log
    resolver = resolver or DefaultPathResolver()
    result: List[CssRef] = []

    # Materialize first: consuming markers mutates attributes during the walk.
    for element in list(ctx.doc.iter('link')):
        if consume_ignore_marker(element, ignore_attr):
            continue

        href = element.get('href')
        if element.get('rel') == 'stylesheet' and is_local_asset(href, CSS_SUFFIX):
            result.append(CssRef(orig_tag=element, absolute_path=resolver.resolve(ctx.base_dir, href)))

    log.info('Found %d replaceable CSS <link> tag(s)', len(result))
    return result


def find_script_refs(
        ctx: InlineContext,
        *,
        ignore_attr: str = IGNORE_ATTR,
        resolver: Optional[PathResolverProtocol] = None,
        logger: Optional[logging.Logger] = None,
) -> List[ScriptRef]:
    """Return every empty `<script src="*.js">` with a local src.

    Scripts with inline content are never candidates, even with a src.
    """
    log = logger or _log
    resolver = resolver or DefaultPathResolver()
    result: List[ScriptRef] = []

    for element in list(ctx.doc.iter('script')):
        if consume_ignore_marker(element, ignore_attr):
            continue

        src = element.get('src')
        if is_local_asset(src, JS_SUFFIX) and not element.text_content().strip():
            result.append(
                ScriptRef(
                    orig_tag=element,
                    mount_point=element.getparent(),
                    absolute_path=resolver.resolve(ctx.base_dir, src),
                )
            )

    log.info('Found %d replaceable JS <script> tag(s)', len(result))
    return result
