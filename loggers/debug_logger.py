# -*- coding: utf-8 -*-
"""
Structured Debug Logger for the Fuzzy MCDM Pipeline
===================================================

Collects everything a run did into one JSON array
(``<output_dir>/debug_<timestamp>.json``): the term registry, the weight
vector, the ratings matrix, aggregated TFNs, the ranking and phase timings.

Entry layout::

    {"timestamp", "level", "module", "function", "line",
     "phase", "context", "message", "data"?}

``context`` holds every :class:`LogContext` key other than ``phase``
(e.g. the decision posture during ranking). Records sent by library modules
to ``logging.getLogger('fuzzy_mcdm')`` are captured too.
"""

from __future__ import annotations

import json
import logging
import traceback
from dataclasses import asdict, is_dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from .context import Colors, LogContext, PhaseMetrics


class DebugLogger:
    """
    In-memory list of structured entries, written out by :meth:`flush`.

    Parameters
    ----------
    output_dir : str or Path
        Directory of the JSON file (created if missing).
    logger_name : str
        Stdlib logger whose records are intercepted until :meth:`close`.
    """

    def __init__(self, output_dir: str = 'result/logs',
                 logger_name: str = 'fuzzy_mcdm'):
        self._dir = Path(output_dir)
        self._dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        self._path = self._dir / f'debug_{stamp}.json'
        self._entries: List[Dict[str, Any]] = []

        self._stdlib_logger = logging.getLogger(logger_name)
        self._previous_level = self._stdlib_logger.level
        self._stdlib_logger.setLevel(logging.DEBUG)
        self._handler = _InterceptHandler(self)
        self._stdlib_logger.addHandler(self._handler)

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def debug(self, message: str, *, data: Any = None) -> None:
        self._add('DEBUG', message, data=data)

    def info(self, message: str, *, data: Any = None) -> None:
        self._add('INFO', message, data=data)

    def warning(self, message: str, *, data: Any = None) -> None:
        self._add('WARNING', message, data=data)

    def exception(self, message: str, exc: Optional[BaseException] = None) -> None:
        """ERROR entry with the formatted traceback of *exc* (or the active one)."""
        if exc is None:
            tb = traceback.format_exc()
        else:
            tb = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        self._add('ERROR', message, data={'traceback': tb})

    def log_data(self, label: str, payload: Any) -> None:
        """DATA entry: registry frames, weight dicts, rankings, ..."""
        self._add('DATA', label, data=payload)

    def log_phases(self, phases: Iterable[PhaseMetrics]) -> None:
        self._add('DATA', 'phase_timings', data=[p.as_dict() for p in phases])

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def flush(self) -> str:
        """Write all entries so far; returns the file path."""
        with open(self._path, 'w', encoding='utf-8') as fh:
            json.dump(self._entries, fh, indent=2, default=_json_default,
                      ensure_ascii=False)
        return str(self._path)

    def close(self) -> str:
        """Flush, stop intercepting stdlib records and restore the logger level."""
        path = self.flush()
        self._stdlib_logger.removeHandler(self._handler)
        self._stdlib_logger.setLevel(self._previous_level)
        return path

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def entries(self) -> List[Dict[str, Any]]:
        return list(self._entries)

    def _add(self, level: str, message: str, *, data: Any = None,
             module: str = '', function: str = '', line: int = 0) -> None:
        context = LogContext.snapshot()
        entry: Dict[str, Any] = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'module': module,
            'function': function,
            'line': line,
            'phase': context.pop('phase', ''),
            'context': context,
            'message': Colors.strip(str(message)),
        }
        if data is not None:
            entry['data'] = data
        self._entries.append(entry)


class _InterceptHandler(logging.Handler):
    """Forwards stdlib ``logging`` records into a :class:`DebugLogger`."""

    def __init__(self, debug_logger: DebugLogger):
        super().__init__(level=logging.DEBUG)
        self._debug_logger = debug_logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._debug_logger._add(
                record.levelname,
                record.getMessage(),
                module=record.module,
                function=record.funcName,
                line=record.lineno,
            )
        except Exception:
            self.handleError(record)


def _json_default(obj: Any) -> Any:
    """JSON fallback for numpy, pandas, enums, paths and fuzzy numbers."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, pd.DataFrame):
        return obj.to_dict(orient='index')
    if isinstance(obj, pd.Series):
        return obj.to_dict()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return str(obj)
    if hasattr(obj, 'as_tuple'):
        return list(obj.as_tuple())
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return str(obj)


__all__ = ['DebugLogger']
