"""
htmlinliner.utils – Small shared utilities (URL and suffix checks).
"""
from .paths import has_suffix, is_local_asset, looks_like_url

__all__ = ["has_suffix", "is_local_asset", "looks_like_url"]
