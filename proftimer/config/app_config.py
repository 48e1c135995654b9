#!filepath: proftimer/config/app_config.py
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .profiling_config import ProfilingConfig


def default_config_path() -> str:
    """
    返回随包发布的默认配置:
    proftimer/config/app_config.py → proftimer/config/base.yml
    """
    return str(Path(__file__).resolve().parent / "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    profiling: ProfilingConfig = Field(default_factory=ProfilingConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 base.yml
        - .env 从当前工作目录读取（不存在则忽略）
        """
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        return cls(**raw)
