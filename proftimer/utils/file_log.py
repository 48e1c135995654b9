#!filepath: proftimer/utils/file_log.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from proftimer import logs
from proftimer.utils.errors import LogOpenError

HEADER_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogTarget:
    """
    描述一个追加式文本日志文件（只描述，不打开）。

    - create()  → 截断文件并写入时间戳首行
    - append()  → 追加模式打开，不截断
    """

    path: Path

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))

    def _open(self, mode: str) -> TextIO:
        try:
            return open(self.path, mode, encoding="utf-8")
        except OSError as e:
            raise LogOpenError(self.path, e.strerror or str(e)) from e

    def create(self) -> "FileLog":
        # 只有首行用 "w" 截断；之后所有实例都以追加模式写入，互不覆盖
        with self._open("w") as handle:
            handle.write(datetime.now().strftime(HEADER_FORMAT) + "\n")
        logs.debug(f"[FileLog] created {self.path}")
        return self.append()

    def append(self) -> "FileLog":
        return FileLog(self, self._open("a"))


class FileLog:
    """Append-only line sink. Obtain one through ``LogTarget``."""

    def __init__(self, target: LogTarget, handle: TextIO):
        self.target = target
        self._handle = handle

    @property
    def path(self) -> Path:
        return self.target.path

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def log_message(self, message: str) -> None:
        self._handle.write(f"{message}\n")
        self._handle.flush()

    def reopen(self) -> "FileLog":
        """A second, independent instance on the same file (never truncates)."""
        return self.target.append()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def __enter__(self) -> "FileLog":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def log_message(log: FileLog, message: Any) -> None:
    log.log_message(str(message))


def log_cond(log: FileLog, cond: bool, message: Any) -> None:
    if cond:
        log_message(log, message)
