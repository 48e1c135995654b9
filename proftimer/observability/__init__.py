#!filepath: proftimer/observability/__init__.py
# toggle 不在这里导入：它在 import 时读取环境变量，由调用方显式导入。
from .stopwatch import Stopwatch, StopwatchControl, global_stopwatch
from .series import SeriesBuffer
from .summary import SeriesSummary, summarize_series
from .summary_reporter import SummaryReporter
from .profiler import Profiler, NoOpProfiler, PreallocationHint, get_profiler, profiler_for
