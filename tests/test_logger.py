"""Tests for the ward logger setup."""

import logging

import pytest

from utils.logger import configure_logger


@pytest.fixture
def fresh_logger_name(request):
    name = f"ward.test.{request.node.name}"
    yield name
    log = logging.getLogger(name)
    for handler in list(log.handlers):
        handler.close()
        log.removeHandler(handler)


class TestConfigureLogger:
    def test_explicit_level_and_path(self, fresh_logger_name, tmp_path):
        log_file = tmp_path / "nested" / "ward.log"
        log = configure_logger(fresh_logger_name, level="debug", log_path=log_file)

        assert log.level == logging.DEBUG
        assert log_file.parent.is_dir()
        file_handlers = [h for h in log.handlers if isinstance(h, logging.FileHandler)]
        assert [h.baseFilename for h in file_handlers] == [str(log_file)]

    def test_level_and_path_from_env(self, fresh_logger_name, tmp_path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("WARD_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("WARD_LOG_PATH", str(log_file))

        log = configure_logger(fresh_logger_name)
        log.warning("bed 101 blocked")
        for handler in log.handlers:
            handler.flush()

        assert log.level == logging.WARNING
        assert "bed 101 blocked" in log_file.read_text(encoding="utf-8")

    def test_second_call_keeps_handlers(self, fresh_logger_name, tmp_path):
        log = configure_logger(fresh_logger_name, level="INFO", log_path=tmp_path / "a.log")
        again = configure_logger(fresh_logger_name, level="ERROR", log_path=tmp_path / "a.log")

        assert again is log
        assert len(log.handlers) == 2
        assert log.level == logging.ERROR
