# !filepath: proftimer/config/environment.py
import os

ENABLE_PROFILING_ENV = "PROFTIMER_ENABLE_PROFILING"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


def profiling_enabled_from_env(environ=None) -> bool:
    """
    读取 PROFTIMER_ENABLE_PROFILING。
    未设置视为关闭；无法识别的取值直接报错，避免静默关闭。
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(ENABLE_PROFILING_ENV, "").strip().lower()

    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False

    raise ValueError(f"Unknown {ENABLE_PROFILING_ENV}={raw!r}")
