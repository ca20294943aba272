from __future__ import annotations

import logging
from typing import ClassVar, Optional, TextIO, Tuple

from htmlinliner.core.interfaces.logging import LoggerLikeProtocol
from htmlinliner.logging.helpers import get_logger, setup_base_logger

LogMode = Tuple[bool, int]


class DefaultLoggerFactory:
    """Hands out 'htmlinliner.*' loggers after configuring the base logger.

    The base logger is process-wide, so the applied (json, level) mode is
    remembered on the class: a second factory asking for the same mode
    reuses the existing handler instead of replacing it. A factory bound to
    an explicit stream always reconfigures.
    """

    _active_mode: ClassVar[Optional[LogMode]] = None

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._mode: LogMode = (bool(json_logs), int(level))
        self._stream: Optional[TextIO] = stream

    @property
    def mode(self) -> LogMode:
        return self._mode

    @classmethod
    def reset(cls) -> None:
        """Forget the applied mode so the next factory reconfigures."""
        cls._active_mode = None

    def configure(self) -> bool:
        """Apply this factory's mode; return False when it was already active."""
        if self._stream is None and DefaultLoggerFactory._active_mode == self._mode:
            return False
        json_logs, level = self._mode
        setup_base_logger(json_logs=json_logs, level=level, stream=self._stream)
        DefaultLoggerFactory._active_mode = None if self._stream is not None else self._mode
        return True

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        self.configure()
        return get_logger(name)
