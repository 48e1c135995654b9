# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from proftimer import Profiler


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


class FakeClock:
    """手动推进的单调时钟，避免依赖真实 sleep。"""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def report_lines() -> list[str]:
    return []


@pytest.fixture
def profiler(clock, report_lines) -> Profiler:
    return Profiler(clock=clock, sink=report_lines.append)


@pytest.fixture
def captured_logs():
    """临时添加一个 loguru sink 捕获输出。"""
    captured: list[str] = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), format="{message}")
    yield captured
    logger.remove(sink_id)
