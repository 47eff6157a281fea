import json
import logging
from datetime import datetime
from pathlib import Path

import pytest
from loguru import logger as _loguru_logger

from opentdb import logger as logger_mod
from opentdb.logger import BaseSink, InterceptHandler, JSONSink


@pytest.fixture
def json_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the JSON sink at a temp directory and reset the singleton."""
    today = datetime.now().date()
    log_file_name = f"test-{today}.jsonl"
    original_jsonsink = logger_mod.JSONSink
    monkeypatch.setattr(
        logger_mod,
        "JSONSink",
        lambda log_dir=None: original_jsonsink(log_dir=str(tmp_path), log_file_name=log_file_name),
    )
    logger_mod.close_logger()
    yield tmp_path / log_file_name
    logger_mod.close_logger()


def read_messages(log_file: Path):
    messages = []
    for line in log_file.read_text(encoding="utf-8").splitlines():
        record = json.loads(line).get("record", {})
        messages.append((record.get("message"), record.get("extra", {}).get("logger_name")))
    return messages


def test_get_logger_returns_singleton(json_log: Path) -> None:
    logger1 = logger_mod.get_logger()
    logger2 = logger_mod.get_logger()
    assert logger1 is logger2
    assert type(logger1) is type(_loguru_logger)


def test_jsonsink_writes_jsonl(json_log: Path) -> None:
    log = logger_mod.get_logger()
    log.info("fetched 3 questions")
    log.complete()
    assert json_log.exists()
    assert ("fetched 3 questions", None) in read_messages(json_log)


def test_enable_json_logging_forwards_package_records(json_log: Path) -> None:
    log = logger_mod.enable_json_logging()
    logging.getLogger("opentdb.client").info("Fetched 10 questions from OpenTDB")
    log.complete()
    assert ("Fetched 10 questions from OpenTDB", "opentdb.client") in read_messages(json_log)


def test_enable_json_logging_is_idempotent(json_log: Path) -> None:
    logger_mod.enable_json_logging()
    logger_mod.enable_json_logging()
    handlers = [h for h in logging.getLogger("opentdb").handlers if isinstance(h, InterceptHandler)]
    assert len(handlers) == 1


def test_disable_json_logging_removes_handler(json_log: Path) -> None:
    logger_mod.enable_json_logging()
    logger_mod.disable_json_logging()
    assert not any(isinstance(h, InterceptHandler) for h in logging.getLogger("opentdb").handlers)


def test_jsonsink_close(tmp_path: Path) -> None:
    sink = JSONSink(log_dir=str(tmp_path), log_file_name="close.jsonl")
    sink.write("line\n")
    sink.close()
    sink.close()
    assert (tmp_path / "close.jsonl").read_text(encoding="utf-8") == "line\n"


def test_basesink_protocol() -> None:
    class DummySink:
        def write(self, message: str) -> None:
            self.last = message
    sink: BaseSink = DummySink()
    sink.write("abc")
    assert getattr(sink, "last", None) == "abc"
