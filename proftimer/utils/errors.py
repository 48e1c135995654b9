# proftimer/utils/errors.py
class ProftimerError(RuntimeError):
    """Base class for every error raised by proftimer."""


class PreconditionViolation(ProftimerError):
    """
    调用顺序错误（programmer error）。
    Must surface immediately, never be answered with a fabricated value.
    """


class TimerNotStartedError(PreconditionViolation):
    """Raised by ``Profiler.record`` when ``start_timer`` was never called for the key."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"timer '{name}' was never started; call start_timer('{name}') first")


class ResourceError(ProftimerError):
    """Environment failure (file cannot be opened, etc)."""


class LogOpenError(ResourceError):
    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"cannot open log file {path}: {reason}")
