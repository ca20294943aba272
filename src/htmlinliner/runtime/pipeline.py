from __future__ import annotations
"""Inlining pipeline.

Loader → Scanner (CSS, scripts) → Substitutor (CSS, scripts) → Serializer,
over one document owned by a single run. Any `InlinerError` aborts the run
before a serialized document exists, so callers never see partial output.
"""
from pathlib import Path
from typing import Optional, Tuple

from lxml.html import HtmlElement

from htmlinliner.core.interfaces.fs import PathResolverProtocol
from htmlinliner.core.interfaces.logging import LoggerLikeProtocol
from htmlinliner.core.interfaces.readers import AssetReaderProtocol
from htmlinliner.core.models import InlineContext, InlinerConfig
from htmlinliner.core.report import InlineReport, StageTimer
from htmlinliner.discovery.scanner import find_css_refs, find_script_refs
from htmlinliner.io.document import load_document, read_document, serialize_document
from htmlinliner.io.readers import AssetReader
from htmlinliner.rendering.path_resolver import DefaultPathResolver
from htmlinliner.rendering.substitutor import (
    append_style,
    find_single_head,
    inline_css,
    inline_scripts,
)


class InlinePipeline:
    def __init__(
            self,
            config: Optional[InlinerConfig] = None,
            *,
            reader: Optional[AssetReaderProtocol] = None,
            resolver: Optional[PathResolverProtocol] = None,
            logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._cfg = config or InlinerConfig()
        # None lets each stage log under its own module name.
        self._log: Optional[LoggerLikeProtocol] = logger
        self._reader: AssetReaderProtocol = reader or AssetReader(encoding=self._cfg.encoding, logger=logger)
        self._resolver: PathResolverProtocol = resolver or DefaultPathResolver()

    @property
    def config(self) -> InlinerConfig:
        return self._cfg

    def run_file(self, path: Path) -> Tuple[str, InlineReport]:
        """Inline the assets referenced by the HTML file at *path*."""
        report = InlineReport()
        path = Path(path)
        with StageTimer(report, 'load'):
            doc = read_document(path, encoding=self._cfg.encoding, logger=self._log)
        return self._run(doc, path.parent, report)

    def run_text(self, html: str, base_dir: Path) -> Tuple[str, InlineReport]:
        """Inline assets of *html*, resolving references against *base_dir*."""
        report = InlineReport()
        with StageTimer(report, 'load'):
            doc = load_document(html)
        return self._run(doc, Path(base_dir), report)

    def run_document(self, doc: HtmlElement, base_dir: Path) -> Tuple[str, InlineReport]:
        """Inline assets of an already parsed tree (mutated in place)."""
        return self._run(doc, Path(base_dir), InlineReport())

    def _run(self, doc: HtmlElement, base_dir: Path, report: InlineReport) -> Tuple[str, InlineReport]:
        ctx = InlineContext(base_dir=base_dir, doc=doc)

        # Structural check first: a bad <head> must fail before any rewrite.
        find_single_head(doc)

        with StageTimer(report, 'scan'):
            css_refs = find_css_refs(
                ctx, ignore_attr=self._cfg.ignore_attr, resolver=self._resolver, logger=self._log
            )
            script_refs = find_script_refs(
                ctx, ignore_attr=self._cfg.ignore_attr, resolver=self._resolver, logger=self._log
            )
        report.css_found = len(css_refs)
        report.scripts_found = len(script_refs)

        with StageTimer(report, 'inline_css'):
            css = inline_css(css_refs, ctx, reader=self._reader, logger=self._log, report=report)
            append_style(ctx, css)

        with StageTimer(report, 'inline_js'):
            inline_scripts(script_refs, ctx, reader=self._reader, logger=self._log, report=report)

        with StageTimer(report, 'serialize'):
            out = serialize_document(doc)

        report.finish()
        return out, report


def inline_html(html: str, base_dir: Path | str, config: Optional[InlinerConfig] = None) -> str:
    """Convenience wrapper: return *html* with its local assets inlined."""
    out, _ = InlinePipeline(config).run_text(html, Path(base_dir))
    return out
