# -*- coding: utf-8 -*-
"""
Logging Decorators and Context Managers
=======================================

Everything here writes to the ``fuzzy_mcdm`` stdlib logger, which the
debug logger intercepts while a run is active.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Optional

from .context import LogContext

_LOGGER_NAME = 'fuzzy_mcdm'


def _resolve(logger: Optional[logging.Logger]) -> logging.Logger:
    return logger or logging.getLogger(_LOGGER_NAME)


def log_execution(logger: Optional[logging.Logger] = None,
                  level: int = logging.DEBUG,
                  show_result: bool = False) -> Callable:
    """
    Log entry, exit and duration of the decorated callable.

    Failures are logged at ERROR with the elapsed time and re-raised.
    """

    def decorator(func: Callable) -> Callable:
        name = func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            log = _resolve(logger)
            log.log(level, f'Calling {name}')
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                log.error(f'{name} failed after {time.time() - start:.3f}s: {exc}')
                raise
            elapsed = time.time() - start
            if show_result:
                log.log(level, f'{name} returned {repr(result)[:100]} ({elapsed:.3f}s)')
            else:
                log.log(level, f'{name} completed ({elapsed:.3f}s)')
            return result

        return wrapper
    return decorator


def log_exceptions(logger: Optional[logging.Logger] = None,
                   level: int = logging.ERROR) -> Callable:
    """Log an exception escaping the decorated callable, with traceback, then re-raise."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                _resolve(logger).log(level, f'Exception in {func.__qualname__}: {exc}',
                                     exc_info=True)
                raise
        return wrapper
    return decorator


@contextmanager
def log_context(**values: Any) -> Generator[None, None, None]:
    """Add *values* to :class:`LogContext` for the block, restoring prior values after."""
    previous = {key: LogContext.get()[key] for key in values if key in LogContext.get()}
    for key, value in values.items():
        LogContext.set(key, value)
    try:
        yield
    finally:
        for key in values:
            if key in previous:
                LogContext.set(key, previous[key])
            else:
                LogContext.remove(key)


@contextmanager
def timed_operation(logger: Optional[logging.Logger],
                    operation: str,
                    level: int = logging.INFO) -> Generator[None, None, None]:
    """Log ``Starting: …`` / ``Finished: … (Ns)`` around the block."""
    log = _resolve(logger)
    start = time.time()
    log.log(level, f'Starting: {operation}')
    try:
        yield
    finally:
        log.log(level, f'Finished: {operation} ({time.time() - start:.3f}s)')


__all__ = [
    'log_execution',
    'log_exceptions',
    'log_context',
    'timed_operation',
]
