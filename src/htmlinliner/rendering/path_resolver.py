from __future__ import annotations
"""
Path resolver for asset references.

`href`/`src` values are appended to the HTML file's directory and
normalized to an absolute path. A leading '/' does not escape the base
directory: the HTML file's directory is the site root. Symlinks are left
alone and '~' is not expanded, since the value is a URL path.
"""

import os
from pathlib import Path

from htmlinliner.core.interfaces.fs import PathResolverProtocol


class PathResolver(PathResolverProtocol):
    """Directory-join then normalize resolver."""

    def resolve(self, base: Path, path: str) -> Path:
        """Return the absolute, normalized path of `path` under `base`."""
        joined = os.path.join(os.fspath(base), path.lstrip('/\\'))
        return Path(os.path.abspath(joined))


DefaultPathResolver = PathResolver
