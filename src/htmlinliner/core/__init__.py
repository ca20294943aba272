from __future__ import annotations

"""Public surface for htmlinliner.core.

Stable import location for the data model, error types and protocols:

    from htmlinliner.core import CssRef, ScriptRef, AssetReadError, ...
"""

from htmlinliner.core.errors import (
    AssetReadError,
    DocumentLoadError,
    DocumentStructureError,
    InlinerError,
    UsageError,
)
from htmlinliner.core.interfaces import (
    AssetReaderProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    PathResolverProtocol,
)
from htmlinliner.core.models import CssRef, InlineContext, InlinerConfig, ScriptRef

__all__ = [
    # Models
    "CssRef",
    "ScriptRef",
    "InlineContext",
    "InlinerConfig",
    # Errors
    "InlinerError",
    "UsageError",
    "DocumentLoadError",
    "DocumentStructureError",
    "AssetReadError",
    # Protocols
    "AssetReaderProtocol",
    "PathResolverProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
]
