#!filepath: proftimer/observability/summary_reporter.py
from typing import Callable, Iterable, List, Optional

from proftimer import logs
from proftimer.observability.summary import SeriesSummary

Sink = Callable[[str], None]


class SummaryReporter:
    """
    Profiler 报告（冷路径）：
    - single → 多行带标签的统计块
    - group  → 每个 key 一行，顺序与输入一致
    """

    def __init__(self, sink: Optional[Sink] = None, name_width: int = 30, precision: int = 6):
        self.sink = sink
        self.name_width = name_width
        self.precision = precision

    def _emit(self, lines: List[str]) -> List[str]:
        sink = self.sink if self.sink is not None else logs.info
        for line in lines:
            sink(line)
        return lines

    def _fmt(self, value: float) -> str:
        return f"{value:.{self.precision}f}"

    def single_lines(self, s: SeriesSummary) -> List[str]:
        return [
            f"[Profile] ===== Summary for {s.name} =====",
            f"[Profile] count : {s.count}",
            f"[Profile] total : {self._fmt(s.total)}",
            f"[Profile] mean  : {self._fmt(s.mean)}",
            f"[Profile] min   : {self._fmt(s.minimum)}",
            f"[Profile] max   : {self._fmt(s.maximum)}",
            f"[Profile] std   : {self._fmt(s.std)}",
            "[Profile] =====================================",
        ]

    def group_line(self, s: SeriesSummary) -> str:
        name_str = str(s.name)
        return (
            f"[Profile] {name_str:<{self.name_width}} "
            f"count={s.count:>6} "
            f"total={self._fmt(s.total)} "
            f"mean={self._fmt(s.mean)} "
            f"min={self._fmt(s.minimum)} "
            f"max={self._fmt(s.maximum)}"
        )

    def print_single(self, summary: SeriesSummary) -> List[str]:
        return self._emit(self.single_lines(summary))

    def print_group(self, summaries: Iterable[SeriesSummary]) -> List[str]:
        return self._emit([self.group_line(s) for s in summaries])
