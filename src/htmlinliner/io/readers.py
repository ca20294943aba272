from __future__ import annotations

"""
Strict text reader for referenced assets.

Unlike a lenient reader, any failure (missing file, permissions, bad
encoding) is raised as `AssetReadError`: a stylesheet or script that cannot
be read must abort the whole run.
"""

import logging
from pathlib import Path
from typing import Optional

from htmlinliner.constants import DEFAULT_ENCODING
from htmlinliner.core.errors import AssetReadError
from htmlinliner.core.interfaces.readers import AssetReaderProtocol
from htmlinliner.logging.helpers import get_logger, trace_io


class AssetReader(AssetReaderProtocol):
    def __init__(self, *, encoding: str = DEFAULT_ENCODING, logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._log = logger or get_logger('io.readers')

    def read_text(self, path: Path) -> str:
        try:
            # newline='' keeps \r\n untouched: content is embedded verbatim.
            with open(path, 'r', encoding=self._encoding, newline='') as fh:
                content = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise AssetReadError(path, exc) from exc
        trace_io(self._log, 'read asset', path=str(path), chars=len(content))
        return content
