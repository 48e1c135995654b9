#!filepath: proftimer/observability/profiler.py
from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from proftimer import logs
from proftimer.observability.series import DEFAULT_CAPACITY, SeriesBuffer
from proftimer.observability.stopwatch import Clock, Stopwatch, StopwatchControl
from proftimer.observability.summary import SeriesSummary, summarize_series
from proftimer.observability.summary_reporter import Sink, SummaryReporter
from proftimer.utils.errors import TimerNotStartedError


@dataclass(frozen=True)
class PreallocationHint:
    num_names: int
    num_events: int


class Profiler:
    """
    命名计时器 + 数据序列注册表。

    设计铁律：
    1. 每个 key 的 timer 与 series 互相独立
    2. series 只追加，顺序即记录顺序
    3. record 之前必须 start_timer，否则抛 TimerNotStartedError
    4. 预分配只影响容量，不影响结果
    5. 热路径不打日志

    可以直接实例化（测试 / 隔离场景），也可以通过 get_profiler() 使用进程级默认实例。
    """

    def __init__(
        self,
        clock: Clock = time.perf_counter,
        sink: Optional[Sink] = None,
        name_width: int = 30,
        precision: int = 6,
    ):
        self._clock = clock
        self._lock = threading.RLock()
        self._timers: Dict[str, Stopwatch] = {}
        self._data: Dict[str, SeriesBuffer] = {}
        self._pool: List[SeriesBuffer] = []
        self.hint: Optional[PreallocationHint] = None
        self.reporter = SummaryReporter(sink=sink, name_width=name_width, precision=precision)

    # ---------------------------------------------------------
    # State
    # ---------------------------------------------------------
    def reset_and_preallocate(self, num_names: int, num_events: int) -> None:
        """
        清空所有 timer 与 series，并为 num_names 个 key 各预留 num_events 容量。
        """
        if num_names < 0 or num_events < 0:
            raise ValueError(
                f"preallocation sizes must be >= 0, got num_names={num_names}, num_events={num_events}"
            )

        with self._lock:
            self._timers.clear()
            self._data.clear()
            self.hint = PreallocationHint(num_names, num_events)
            self._pool = [SeriesBuffer(num_events) for _ in range(num_names)]

        logs.debug(f"[Profiler] reinitialized names={num_names} events={num_events}")

    def reset(self, name: str) -> None:
        """Clear the series of ``name`` only. The timer keeps running."""
        with self._lock:
            series = self._data.get(name)
            if series is not None:
                series.clear()

    def _series(self, name: str) -> SeriesBuffer:
        series = self._data.get(name)
        if series is None:
            if self._pool:
                series = self._pool.pop()
            else:
                capacity = self.hint.num_events if self.hint else DEFAULT_CAPACITY
                series = SeriesBuffer(capacity)
            self._data[name] = series
        return series

    # ---------------------------------------------------------
    # Hot path
    # ---------------------------------------------------------
    def start_timer(self, name: str) -> None:
        with self._lock:
            timer = self._timers.get(name)
            if timer is None:
                self._timers[name] = Stopwatch(self._clock)
            else:
                timer(StopwatchControl.RESET)

    def record(self, name: str) -> float:
        """
        读取 name 的 timer（不重置），追加到 series 并返回。
        """
        with self._lock:
            timer = self._timers.get(name)
            if timer is None:
                raise TimerNotStartedError(name)
            elapsed = timer(StopwatchControl.READ)
            self._series(name).append(elapsed)
            return elapsed

    def add_data(self, name: str, value: float) -> None:
        value = float(value)
        with self._lock:
            self._series(name).append(value)

    @contextmanager
    def timer(self, name: str):
        """
        Time the block with its own Stopwatch and append the result to ``name``
        (also when the block raises). Nested blocks with the same key do not
        interfere; the named timer used by start_timer/record is untouched.
        """
        sw = Stopwatch(self._clock)
        try:
            yield
        finally:
            self.add_data(name, sw())

    # ---------------------------------------------------------
    # Read side（冷路径）
    # ---------------------------------------------------------
    def get_data(self, name: str) -> List[float]:
        with self._lock:
            series = self._data.get(name)
            return series.tolist() if series is not None else []

    def names(self) -> List[str]:
        with self._lock:
            return list(self._data)

    def summarize(self, name: str) -> SeriesSummary:
        with self._lock:
            series = self._data.get(name)
            if series is None:
                return SeriesSummary.empty(name)
            return summarize_series(name, series.view())

    def print_single_summary(self, name: str) -> SeriesSummary:
        summary = self.summarize(name)
        self.reporter.print_single(summary)
        return summary

    def print_group_summary(self, names: Iterable[str]) -> List[SeriesSummary]:
        summaries = [self.summarize(name) for name in names]
        self.reporter.print_group(summaries)
        return summaries


# -------------------------------------------------------------
# No-op Profiler（禁用 profiling）
# -------------------------------------------------------------
class NoOpProfiler:
    """Profiling disabled 时使用：接口一致，不触碰任何状态。"""

    def reset_and_preallocate(self, num_names: int, num_events: int) -> None:
        pass

    def reset(self, name: str) -> None:
        pass

    def start_timer(self, name: str) -> None:
        pass

    def record(self, name: str) -> None:
        return None

    def add_data(self, name: str, value: float) -> None:
        pass

    def timer(self, name: str):
        return _NOOP_BLOCK

    def get_data(self, name: str) -> List[float]:
        return []

    def names(self) -> List[str]:
        return []

    def summarize(self, name: str) -> SeriesSummary:
        return SeriesSummary.empty(name)

    def print_single_summary(self, name: str) -> None:
        pass

    def print_group_summary(self, names: Iterable[str]) -> None:
        pass


class _NoOpBlock:
    __slots__ = ()

    def __enter__(self):
        return None

    def __exit__(self, exc_type, exc, tb):
        return False


_NOOP_BLOCK = _NoOpBlock()
_NOOP_PROFILER = NoOpProfiler()


def profiler_for(enabled: bool, **kwargs) -> Profiler | NoOpProfiler:
    return Profiler(**kwargs) if enabled else _NOOP_PROFILER


_default_profiler: Optional[Profiler] = None
_default_lock = threading.Lock()


def get_profiler() -> Profiler:
    """进程级默认 Profiler，首次访问时创建。"""
    global _default_profiler

    if _default_profiler is None:
        with _default_lock:
            if _default_profiler is None:
                _default_profiler = Profiler()

    return _default_profiler
