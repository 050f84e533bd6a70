# -*- coding: utf-8 -*-
"""
Fuzzy MCDM Logging Package
==========================

Two channels per run:

* ``ConsoleLogger`` prints phase progress and the final ranking.
* ``DebugLogger`` keeps a structured JSON trail of the data behind it.

Library modules only call ``logging.getLogger('fuzzy_mcdm')``; while a
debug logger is open it intercepts those records.

Usage::

    from loggers import setup_logging
    console, debug = setup_logging(config.paths.logs_dir)
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from .context import Colors, LogContext, PhaseMetrics
from .console_logger import ConsoleLogger
from .debug_logger import DebugLogger
from .decorators import log_execution, log_exceptions, log_context, timed_operation

LOGGER_NAME = 'fuzzy_mcdm'


def setup_logging(logs_dir: Union[str, Path] = 'result/logs',
                  use_color: Optional[bool] = None) -> Tuple[ConsoleLogger, DebugLogger]:
    """
    Create the console logger and a debug logger writing into *logs_dir*.

    Parameters
    ----------
    logs_dir : str or Path
        Directory of the debug JSON file.
    use_color : bool, optional
        Force console colours on/off (default: autodetect).
    """
    console = ConsoleLogger(use_color=use_color)
    debug = DebugLogger(output_dir=str(logs_dir), logger_name=LOGGER_NAME)
    return console, debug


__all__ = [
    'setup_logging',
    'LOGGER_NAME',
    'ConsoleLogger',
    'DebugLogger',
    'Colors',
    'LogContext',
    'PhaseMetrics',
    'log_execution',
    'log_exceptions',
    'log_context',
    'timed_operation',
]
