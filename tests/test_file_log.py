#!filepath: tests/test_file_log.py
import re

import pytest

from proftimer import LogOpenError, ResourceError
from proftimer.utils.file_log import FileLog, LogTarget, log_cond, log_message

HEADER_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


def test_create_writes_header(tmp_path):
    path = tmp_path / "run.log"

    with LogTarget(path).create() as log:
        log.log_message("first")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert HEADER_RE.match(lines[0])
    assert lines[1:] == ["first"]


def test_create_truncates_existing(tmp_path):
    path = tmp_path / "run.log"
    path.write_text("old content\n", encoding="utf-8")

    LogTarget(path).create().close()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert "old content" not in lines


def test_reopen_appends_without_truncating(tmp_path):
    path = tmp_path / "run.log"
    log = LogTarget(path).create()
    log.log_message("a")

    other = log.reopen()
    other.log_message("b")
    log.log_message("c")
    other.close()
    log.close()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["a", "b", "c"]
    assert other.path == log.path


def test_append_target_keeps_content(tmp_path):
    path = tmp_path / "run.log"
    path.write_text("kept\n", encoding="utf-8")

    with LogTarget(str(path)).append() as log:
        log.log_message("more")

    assert path.read_text(encoding="utf-8") == "kept\nmore\n"


def test_log_helpers_stringify(tmp_path):
    path = tmp_path / "run.log"
    with LogTarget(path).create() as log:
        log_message(log, 42)
        log_cond(log, False, "skipped")
        log_cond(log, True, 1.5)

    assert path.read_text(encoding="utf-8").splitlines()[1:] == ["42", "1.5"]


def test_open_failure_is_resource_error(tmp_path):
    target = LogTarget(tmp_path / "missing_dir" / "run.log")

    with pytest.raises(LogOpenError) as exc:
        target.create()

    assert isinstance(exc.value, ResourceError)
    assert isinstance(exc.value.__cause__, OSError)


def test_close_is_idempotent(tmp_path):
    log = LogTarget(tmp_path / "run.log").create()
    log.close()
    log.close()

    assert log.closed
    assert isinstance(log, FileLog)


def test_interleaved_instances_never_overwrite(tmp_path):
    path = tmp_path / "run.log"
    target = LogTarget(path)
    first = target.create()
    second = target.append()
    third = first.reopen()

    for i in range(3):
        first.log_message(f"first-{i}")
        second.log_message(f"second-{i}")
        third.log_message(f"third-{i}")

    for log in (first, second, third):
        log.close()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert HEADER_RE.match(lines[0])
    assert lines[1:] == [
        f"{name}-{i}" for i in range(3) for name in ("first", "second", "third")
    ]
