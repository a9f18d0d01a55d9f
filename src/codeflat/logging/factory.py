from __future__ import annotations

import logging
from typing import Optional, TextIO

from codeflat.logging.helpers import setup_base_logger, get_logger


class DefaultLoggerFactory:
    """Factory that configures the base logger on first use and hands out scoped loggers.

    Verbose runs log at INFO; quiet runs only surface ERROR records, which is
    what fatal failures are logged at.
    """

    def __init__(self, *, json_logs: bool = False, verbose: bool = False, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = logging.INFO if verbose else logging.ERROR
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @property
    def level(self) -> int:
        return self._level

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
