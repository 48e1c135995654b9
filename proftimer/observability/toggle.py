#!filepath: proftimer/observability/toggle.py
"""
Profiling entry points, bound once at import.

Enable with the environment variable::

    PROFTIMER_ENABLE_PROFILING=1

The switch is read when this module is first imported. Enabled hooks are the
profiler's own bound methods; disabled hooks are shared no-ops, ``profiled``
hands back the undecorated function and ``profile_block`` an inert context
manager. Call sites never test a flag.

Example::

    from proftimer.observability.toggle import (
        profile_reinitialize, profile_start, profile_record,
        profile_print_summary_for_single,
    )

    profile_reinitialize(10, 100)
    profile_start("foo do stuff")
    foo_do_stuff()
    profile_record("foo do stuff")
    profile_print_summary_for_single("foo do stuff")
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Optional

from proftimer.config.environment import profiling_enabled_from_env
from proftimer.observability.profiler import _NOOP_BLOCK, Profiler, get_profiler


@dataclass(frozen=True)
class ProfileHooks:
    enabled: bool
    reinitialize: Callable[[int, int], Any]
    reset: Callable[[str], Any]
    start: Callable[[str], Any]
    record: Callable[[str], Any]
    add_data: Callable[[str, float], Any]
    print_summary_for_single: Callable[[str], Any]
    print_summary_for_group: Callable[[Any], Any]
    block: Callable[[str], Any]
    profiled: Callable[..., Callable[[Callable], Callable]]


def _noop(*args, **kwargs) -> None:
    return None


def _noop_block(name: str):
    return _NOOP_BLOCK


def _identity_decorator(name: Optional[str] = None):
    def decorator(func: Callable) -> Callable:
        return func

    return decorator


def _profiled_decorator(profiler: Profiler):
    def profiled(name: Optional[str] = None):
        def decorator(func: Callable) -> Callable:
            key = name or func.__qualname__

            @wraps(func)
            def wrapper(*args, **kwargs):
                # 每次调用独立计时，递归调用不会重置外层
                with profiler.timer(key):
                    return func(*args, **kwargs)

            return wrapper

        return decorator

    return profiled


_DISABLED = ProfileHooks(
    enabled=False,
    reinitialize=_noop,
    reset=_noop,
    start=_noop,
    record=_noop,
    add_data=_noop,
    print_summary_for_single=_noop,
    print_summary_for_group=_noop,
    block=_noop_block,
    profiled=_identity_decorator,
)


def bind_hooks(enabled: bool, profiler: Optional[Profiler] = None) -> ProfileHooks:
    """
    enabled=True  → hooks 直接是 profiler 的 bound method（无额外包装）
    enabled=False → 共享 no-op，不创建也不触碰任何 profiler
    """
    if not enabled:
        return _DISABLED

    p = profiler if profiler is not None else get_profiler()
    return ProfileHooks(
        enabled=True,
        reinitialize=p.reset_and_preallocate,
        reset=p.reset,
        start=p.start_timer,
        record=p.record,
        add_data=p.add_data,
        print_summary_for_single=p.print_single_summary,
        print_summary_for_group=p.print_group_summary,
        block=p.timer,
        profiled=_profiled_decorator(p),
    )


ENABLE_PROFILING: bool = profiling_enabled_from_env()

_hooks = bind_hooks(ENABLE_PROFILING)

profile_reinitialize = _hooks.reinitialize
profile_reset = _hooks.reset
profile_start = _hooks.start
profile_record = _hooks.record
profile_add_data = _hooks.add_data
profile_print_summary_for_single = _hooks.print_summary_for_single
profile_print_summary_for_group = _hooks.print_summary_for_group
profile_block = _hooks.block
profiled = _hooks.profiled
