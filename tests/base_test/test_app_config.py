#!filepath: tests/base_test/test_app_config.py
import pytest
import yaml
from pydantic import ValidationError

from proftimer.config import AppConfig
from proftimer.config.log_config import LogConfig
from proftimer.config.profiling_config import ProfilingConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "log": {
            "dir": "logs",
            "rotation": "1 day",
            "retention": "30 days",
            "level": "DEBUG",
        },
        "profiling": {
            "prealloc_names": 4,
            "prealloc_events": 256,
            "name_width": 20,
            "precision": 3,
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.profiling, ProfilingConfig)


def test_log_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "DEBUG"
    assert cfg.log.dir == "logs"


def test_profiling_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.profiling.prealloc_names == 4
    assert cfg.profiling.prealloc_events == 256
    assert cfg.profiling.name_width == 20
    assert cfg.profiling.precision == 3


def test_packaged_default_config():
    """不传 path 时读取包内 base.yml"""
    cfg = AppConfig.load()

    assert cfg.log.dir is None
    assert cfg.profiling.prealloc_events == 1024


def test_missing_sections_use_defaults(tmp_path):
    f = tmp_path / "partial.yaml"
    f.write_text(yaml.safe_dump({"log": {"level": "WARNING"}}))

    cfg = AppConfig.load(path=str(f))

    assert cfg.log.level == "WARNING"
    assert cfg.profiling == ProfilingConfig()


def test_missing_file_should_fail(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yaml"))


def test_negative_prealloc_should_fail(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"profiling": {"prealloc_names": -1}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))
