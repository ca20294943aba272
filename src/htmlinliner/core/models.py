from dataclasses import dataclass, field
from pathlib import Path

from lxml.html import HtmlElement

from htmlinliner.constants import DEFAULT_ENCODING, IGNORE_ATTR


@dataclass(frozen=True)
class InlinerConfig:
    """Immutable run configuration resolved from CLI flags and environment."""
    ignore_attr: str = IGNORE_ATTR
    encoding: str = DEFAULT_ENCODING
    json_logs: bool = False
    quiet: bool = False
    report: bool = False


@dataclass(frozen=True)
class InlineContext:
    """Base directory for relative references plus the document being rewritten."""
    base_dir: Path
    doc: HtmlElement = field(repr=False)


@dataclass(frozen=True)
class CssRef:
    orig_tag: HtmlElement = field(repr=False)
    absolute_path: Path


@dataclass(frozen=True)
class ScriptRef:
    orig_tag: HtmlElement = field(repr=False)
    mount_point: HtmlElement = field(repr=False)
    absolute_path: Path
