from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetReaderProtocol(Protocol):
    def read_text(self, path: Path) -> str:
        ...
