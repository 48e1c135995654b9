#!filepath: proftimer/config/profiling_config.py
from pydantic import BaseModel, Field


class ProfilingConfig(BaseModel):
    """
    Profiler 预分配提示 + 报告格式。
    预分配只影响容量，不影响结果。
    """

    prealloc_names: int = Field(default=0, ge=0)
    prealloc_events: int = Field(default=0, ge=0)
    name_width: int = Field(default=30, ge=1)
    precision: int = Field(default=6, ge=0, le=12)
