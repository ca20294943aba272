from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

import re

# Reserved attribute that opts a <link>/<script> tag out of inlining for one run.
IGNORE_ATTR: str = 'x-bundler-ignore'

DOCTYPE: str = '<!DOCTYPE html>'

DEFAULT_ENCODING: str = 'utf-8'

CSS_SUFFIX: str = '.css'
JS_SUFFIX: str = '.js'

ABSOLUTE_URL_RE = re.compile(r'^https?://', re.IGNORECASE)
