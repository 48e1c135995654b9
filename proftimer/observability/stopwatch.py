#!filepath: proftimer/observability/stopwatch.py
import threading
import time
from enum import Enum
from typing import Callable, Optional

Clock = Callable[[], float]


class StopwatchControl(Enum):
    RESET = "reset"
    READ = "read"


class Stopwatch:
    """
    单调时钟计时器
    - Stopwatch()          → 以当前时刻为锚点
    - sw() / sw(READ)      → 返回耗时秒数，不修改锚点
    - sw(RESET)            → 返回耗时秒数，并把锚点移到本次读数时刻
    """

    __slots__ = ("_clock", "_start")

    def __init__(self, clock: Clock = time.perf_counter):
        self._clock = clock
        self._start = clock()

    def __call__(self, control: StopwatchControl = StopwatchControl.READ) -> float:
        now = self._clock()
        elapsed = now - self._start
        if control is StopwatchControl.RESET:
            self._start = now
        return elapsed


_global_stopwatch: Optional[Stopwatch] = None
_global_lock = threading.Lock()


def global_stopwatch(control: StopwatchControl = StopwatchControl.READ) -> float:
    """
    进程级共享 Stopwatch，首次调用时创建。

    注意：RESET 会影响进程内所有调用者。
    """
    global _global_stopwatch

    if _global_stopwatch is None:
        with _global_lock:
            if _global_stopwatch is None:
                _global_stopwatch = Stopwatch()

    return _global_stopwatch(control)
