#!filepath: proftimer/observability/summary.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SeriesSummary:
    """
    单个 key 的描述统计。
    count == 0 时其余字段均为 0.0。
    """

    name: str
    count: int
    total: float
    mean: float
    minimum: float
    maximum: float
    std: float

    @classmethod
    def empty(cls, name: str) -> "SeriesSummary":
        return cls(name=name, count=0, total=0.0, mean=0.0, minimum=0.0, maximum=0.0, std=0.0)


def summarize_series(name: str, values) -> SeriesSummary:
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return SeriesSummary.empty(name)

    return SeriesSummary(
        name=name,
        count=int(arr.size),
        total=float(arr.sum()),
        mean=float(arr.mean()),
        minimum=float(arr.min()),
        maximum=float(arr.max()),
        # population std (ddof=0)
        std=float(arr.std()),
    )
