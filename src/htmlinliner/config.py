from __future__ import annotations

"""Run configuration.

Resolution order for every setting: CLI flag, then environment variable,
then the built-in default.

Environment:
    HTMLINLINER_JSON_LOGS=1     JSON log lines instead of plain text.
    HTMLINLINER_IGNORE_ATTR     Name of the opt-out marker attribute.
"""

import argparse
import os
from typing import Mapping, Optional

from htmlinliner.constants import IGNORE_ATTR
from htmlinliner.core.models import InlinerConfig

ENV_JSON_LOGS = 'HTMLINLINER_JSON_LOGS'
ENV_IGNORE_ATTR = 'HTMLINLINER_IGNORE_ATTR'


def load_config(ns: Optional[argparse.Namespace] = None, env: Optional[Mapping[str, str]] = None) -> InlinerConfig:
    """Build an `InlinerConfig` from parsed CLI flags and the environment."""
    env = os.environ if env is None else env

    json_logs = bool(getattr(ns, 'json_logs', False)) or env.get(ENV_JSON_LOGS) == '1'
    ignore_attr = (getattr(ns, 'ignore_attr', None) or env.get(ENV_IGNORE_ATTR) or IGNORE_ATTR).strip().lower()

    return InlinerConfig(
        ignore_attr=ignore_attr or IGNORE_ATTR,
        json_logs=json_logs,
        quiet=bool(getattr(ns, 'quiet', False)),
        report=bool(getattr(ns, 'report', False)),
    )
