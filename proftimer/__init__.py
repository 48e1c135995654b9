#!filepath: proftimer/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import (
    ProftimerError,
    PreconditionViolation,
    TimerNotStartedError,
    ResourceError,
    LogOpenError,
)
from .config.app_config import AppConfig
from .observability.stopwatch import Stopwatch, StopwatchControl, global_stopwatch
from .observability.profiler import Profiler, NoOpProfiler, get_profiler, profiler_for
from .utils.file_log import FileLog, LogTarget

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "ProftimerError", "PreconditionViolation", "TimerNotStartedError",
    "ResourceError", "LogOpenError",
    "AppConfig",
    "Stopwatch", "StopwatchControl", "global_stopwatch",
    "Profiler", "NoOpProfiler", "get_profiler", "profiler_for",
    "FileLog", "LogTarget",
]
