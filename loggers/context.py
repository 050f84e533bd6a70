# -*- coding: utf-8 -*-
"""
Run Context, Phase Timing and Terminal Colours
==============================================

Shared by :mod:`loggers.console_logger` and :mod:`loggers.debug_logger`:

- ``Colors``       ANSI styling plus colour detection for a stream
- ``LogContext``   per-thread annotations (phase, posture) stamped on entries
- ``PhaseMetrics`` wall-clock timing and reported figures of one phase
"""

import os
import re
import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TextIO


class Colors:
    """ANSI escape sequences used by the console logger."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_WHITE = "\033[97m"

    _ESCAPE = re.compile(r'\033\[[0-9;]*m')

    @classmethod
    def strip(cls, text: str) -> str:
        """*text* without escape sequences (for files and width maths)."""
        return cls._ESCAPE.sub('', text)

    @staticmethod
    def supports_color(stream: Optional[TextIO] = None) -> bool:
        """
        Whether *stream* (default: stdout) should receive colour codes.

        ``NO_COLOR`` wins over ``FORCE_COLOR``; otherwise only TTYs qualify.
        """
        if os.getenv("NO_COLOR"):
            return False
        if os.getenv("FORCE_COLOR"):
            return True
        stream = stream or sys.stdout
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())


class LogContext:
    """
    Thread-local annotations attached to every debug entry.

    The console logger sets ``phase``; the pipeline adds ``posture`` for the
    ranking step through :func:`loggers.log_context`.
    """

    _local = threading.local()

    @classmethod
    def get(cls) -> Dict[str, Any]:
        if not hasattr(cls._local, 'context'):
            cls._local.context = {}
        return cls._local.context

    @classmethod
    def snapshot(cls) -> Dict[str, Any]:
        return dict(cls.get())

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        cls.get()[key] = value

    @classmethod
    def remove(cls, key: str) -> None:
        cls.get().pop(key, None)

    @classmethod
    def clear(cls) -> None:
        cls._local.context = {}


@dataclass
class PhaseMetrics:
    """Timing of one pipeline phase and the figures it reported."""

    name: str
    number: int
    start_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None
    status: str = "running"
    sub_metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def elapsed(self) -> float:
        end = self.end_time or time.time()
        return end - self.start_time

    def finish(self, status: str) -> None:
        self.end_time = time.time()
        self.status = status

    def as_dict(self) -> Dict[str, Any]:
        return {
            'phase': self.name,
            'number': self.number,
            'status': self.status,
            'elapsed_s': round(self.elapsed, 6),
            'metrics': dict(self.sub_metrics),
        }


__all__ = [
    'Colors',
    'LogContext',
    'PhaseMetrics',
]
