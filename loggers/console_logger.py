# -*- coding: utf-8 -*-
"""
Console Logger for the Fuzzy MCDM Pipeline
==========================================

Human-facing output of a decision run: a start banner, one block per
phase with its timing, the linguistic term table, and the final ranking.
The command-line entry point writes to the terminal only through this class.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional, Sequence, TextIO

from .context import Colors, LogContext, PhaseMetrics


_LINE_W = 70


def _fmt(value: Any, precision: int = 4) -> str:
    if isinstance(value, float):
        return f'{value:.{precision}f}'
    return str(value)


class ConsoleLogger:
    """
    Colour-aware console output for decision runs.

    Parameters
    ----------
    use_color : bool, optional
        Force ANSI colours on/off (default: detect from *stream*).
    stream : file-like, optional
        Destination (default: ``sys.stdout`` at write time).
    """

    def __init__(self, use_color: Optional[bool] = None,
                 stream: Optional[TextIO] = None):
        self._stream = stream
        self._color = Colors.supports_color(stream) if use_color is None else use_color
        self._phases: List[PhaseMetrics] = []

    @property
    def phases(self) -> List[PhaseMetrics]:
        return list(self._phases)

    def _paint(self, text: str, *codes: str) -> str:
        if not self._color or not codes:
            return text
        return ''.join(codes) + text + Colors.RESET

    def _write(self, msg: str = '', *codes: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(self._paint(msg, *codes) + '\n')
        stream.flush()

    def _rule(self) -> None:
        self._write('=' * _LINE_W, Colors.BOLD, Colors.BLUE)

    # ------------------------------------------------------------------
    # Banner & phases
    # ------------------------------------------------------------------

    def banner(self, title: str, subtitle: str = '') -> None:
        self._write()
        self._rule()
        self._write(f'  {title}', Colors.BOLD, Colors.BRIGHT_WHITE)
        if subtitle:
            self._write(f'  {subtitle}', Colors.DIM)
        self._rule()

    @contextmanager
    def phase(self, name: str, number: Optional[int] = None,
              total_phases: int = 3) -> Generator[_PhaseCtx, None, None]:
        """
        Announce a phase, time it, and report OK / FAIL on exit.

        The phase name is placed in :class:`LogContext` for the duration so
        debug entries written inside the block carry it.

        Example::

            with console.phase('Aggregation & Ranking', 3) as p:
                ranking = session.ranking()
                p.metric('Best alternative', ranking.winner.alternative)
        """
        metrics = PhaseMetrics(name=name, number=number or len(self._phases) + 1)
        self._phases.append(metrics)
        label = f'[{metrics.number}/{total_phases}] {name}'
        LogContext.set('phase', name)

        self._write()
        self._write(f'>> {label}', Colors.BOLD, Colors.CYAN)
        try:
            yield _PhaseCtx(self, metrics)
        except Exception as exc:
            metrics.finish('failed')
            self._write(f'   FAIL  {label}  ({metrics.elapsed:.2f}s) '
                        f'{type(exc).__name__}: {exc}', Colors.RED, Colors.BOLD)
            raise
        else:
            metrics.finish('completed')
            self._write(f'   OK    {label}  ({metrics.elapsed:.2f}s)', Colors.GREEN)
        finally:
            LogContext.remove('phase')

    # ------------------------------------------------------------------
    # Lines inside a phase
    # ------------------------------------------------------------------

    def step(self, message: str) -> None:
        self._write(f'   . {message}', Colors.WHITE)

    def metric(self, label: str, value: Any, unit: str = '') -> None:
        suffix = f' {unit}' if unit else ''
        self._write(self._paint(f'     {label}: ', Colors.DIM) + _fmt(value) + suffix)

    def metrics(self, data: Dict[str, Any]) -> None:
        """Several metrics on one comma-separated line."""
        body = ', '.join(f'{k}={_fmt(v)}' for k, v in data.items())
        self._write(self._paint('     ', Colors.DIM) + body)

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]],
              indent: int = 4) -> None:
        """Fixed-width table; cells that parse as numbers are right-aligned."""
        widths = [max([len(str(h))] + [len(str(r[i])) for r in rows]) + 2
                  for i, h in enumerate(headers)]
        pad = ' ' * indent
        self._write(pad + '  '.join(f'{h:^{w}}' for h, w in zip(headers, widths)),
                    Colors.BOLD)
        self._write(pad + '  '.join('-' * w for w in widths))
        for row in rows:
            self._write(pad + '  '.join(self._cell(c, w) for c, w in zip(row, widths)))

    @staticmethod
    def _cell(value: Any, width: int) -> str:
        text = str(value)
        try:
            float(text)
        except ValueError:
            return f'{text:<{width}}'
        return f'{text:>{width}}'

    def warning(self, message: str) -> None:
        self._write(f'  ! {message}', Colors.YELLOW)

    def error(self, message: str) -> None:
        self._write(f'  X {message}', Colors.RED, Colors.BOLD)

    def success(self, message: str) -> None:
        self._write(f'  OK {message}', Colors.BRIGHT_GREEN, Colors.BOLD)

    # ------------------------------------------------------------------
    # Domain views
    # ------------------------------------------------------------------

    def show_terms(self, registry: Any, precision: int = 3) -> None:
        """Linguistic term table (name, a, b, c) in registry order."""
        rows = [[name] + [f'{v:.{precision}f}' for v in tfn.as_tuple()]
                for name, tfn in registry.items()]
        self.table(['Term', 'a', 'b', 'c'], rows, indent=5)

    def show_run_summary(self, result: Any, precision: int = 3) -> None:
        """Session figures, weights and the ranking table of a ``PipelineResult``."""
        session = result.session
        ranking = result.ranking

        self._write()
        self._rule()
        self._write('  RESULTS SUMMARY', Colors.BOLD, Colors.BRIGHT_WHITE)
        self._rule()

        self._write('\n  SESSION', Colors.BOLD)
        self.metric('Alternatives', len(session.alternatives))
        self.metric('Criteria', len(session.criteria))
        self.metric('Linguistic terms', len(session.registry))
        self.metric('Posture (LPR)', ranking.posture.value)
        self.metric('Display mode', session.display_mode.value)

        self._write('\n  WEIGHTS', Colors.BOLD)
        self.metrics(result.weights.weights)

        self._write('\n  RANKING', Colors.BOLD)
        df = ranking.to_dataframe(session.display_mode, precision)
        self.table(
            ['Rank', 'Alternative', 'Score', 'Aggregated'],
            [[str(r.Rank), r.Alternative, f'{r.Score:.{precision}f}', r.Aggregated]
             for r in df.itertuples(index=False)],
        )
        if ranking.winner is not None:
            self._write()
            self.success(f'Best alternative: {ranking.winner.alternative}')

        self._write(f'\n  RUNTIME : {result.execution_time:.3f}s', Colors.BOLD)
        self._rule()


class _PhaseCtx:
    """Handle yielded by :meth:`ConsoleLogger.phase`; metrics are recorded."""

    def __init__(self, logger: ConsoleLogger, metrics: PhaseMetrics):
        self._logger = logger
        self.metrics = metrics

    def detail(self, message: str) -> None:
        self._logger.step(message)

    def metric(self, label: str, value: Any, unit: str = '') -> None:
        self.metrics.sub_metrics[label] = value
        self._logger.metric(label, value, unit)

    def warning(self, message: str) -> None:
        self.metrics.sub_metrics.setdefault('warnings', []).append(message)
        self._logger.warning(message)


__all__ = ['ConsoleLogger']
