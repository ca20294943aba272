from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class PathResolverProtocol(Protocol):
    def resolve(self, base: Path, path: str) -> Path:
        ...
