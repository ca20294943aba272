from __future__ import annotations

__version__ = '1.0.0'

from htmlinliner.constants import DOCTYPE, IGNORE_ATTR
from htmlinliner.cli import HtmlInliner, main
from htmlinliner.config import load_config
from htmlinliner.core.errors import (
    AssetReadError,
    DocumentLoadError,
    DocumentStructureError,
    InlinerError,
    UsageError,
)
from htmlinliner.core.models import CssRef, InlineContext, InlinerConfig, ScriptRef
from htmlinliner.core.report import InlineReport
from htmlinliner.discovery.scanner import find_css_refs, find_script_refs
from htmlinliner.io.document import load_document, read_document, serialize_document
from htmlinliner.rendering.substitutor import (
    append_style,
    inline_css,
    inline_scripts,
    replace_with_comment,
    splice_node,
)
from htmlinliner.runtime.pipeline import InlinePipeline, inline_html

__all__ = [
    'HtmlInliner',
    'main',
    'DOCTYPE',
    'IGNORE_ATTR',
    'load_config',
    'InlinerError',
    'UsageError',
    'DocumentLoadError',
    'DocumentStructureError',
    'AssetReadError',
    'CssRef',
    'ScriptRef',
    'InlineContext',
    'InlinerConfig',
    'InlineReport',
    'find_css_refs',
    'find_script_refs',
    'load_document',
    'read_document',
    'serialize_document',
    'append_style',
    'inline_css',
    'inline_scripts',
    'replace_with_comment',
    'splice_node',
    'InlinePipeline',
    'inline_html',
]
