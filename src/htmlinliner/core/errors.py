from __future__ import annotations

"""Error types raised by the inlining pipeline.

Every fatal condition is an ``InlinerError``; only ``htmlinliner.cli.main``
turns them into a process exit status.
"""

from pathlib import Path
from typing import Optional


class InlinerError(Exception):
    """Base class for all fatal inliner failures."""


class UsageError(InlinerError):
    """Wrong number of positional arguments or an unknown option."""


class DocumentLoadError(InlinerError):
    """The input HTML could not be read or parsed."""


class DocumentStructureError(InlinerError):
    """The document does not contain exactly one <head> element."""


class AssetReadError(InlinerError):
    """A referenced stylesheet or script could not be read."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f'Reading file {path} failed: {cause!r}')
