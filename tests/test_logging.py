import io
import logging

from osrm.infra.logging import get_logger, init_logging, log_banner


def test_console_only_by_default(monkeypatch):
    monkeypatch.delenv("OSRM_LOG_LEVEL", raising=False)
    buf = io.StringIO()
    assert init_logging(level="INFO", stream=buf) is None
    log_banner(get_logger("osrm.test"), "hello banner", char="-", width=5)

    lines = buf.getvalue().splitlines()
    assert lines[0].endswith("[INFO][osrm.test] -----")
    assert lines[1].endswith("[INFO][osrm.test] hello banner")
    assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


def test_log_file_receives_records(tmp_path, monkeypatch):
    monkeypatch.delenv("OSRM_LOG_LEVEL", raising=False)
    target = tmp_path / "nested" / "run.log"
    path = init_logging(level="DEBUG", log_file=target, stream=io.StringIO())

    assert path == target.resolve()
    get_logger("osrm.test").warning("to the file")
    assert "[WARNING][osrm.test] to the file" in path.read_text(encoding="utf-8")


def test_reinit_replaces_handlers(tmp_path, monkeypatch):
    monkeypatch.delenv("OSRM_LOG_LEVEL", raising=False)
    init_logging(log_file=tmp_path / "a.log", stream=io.StringIO())
    init_logging(stream=io.StringIO())
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


def test_env_level_overrides(monkeypatch):
    monkeypatch.setenv("OSRM_LOG_LEVEL", "ERROR")
    init_logging(level="DEBUG", stream=io.StringIO())
    assert logging.getLogger().level == logging.ERROR


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.delenv("OSRM_LOG_LEVEL", raising=False)
    init_logging(level="chatty", stream=io.StringIO())
    assert logging.getLogger().level == logging.INFO
