from pathlib import Path

from loguru import logger

from mlopsroi.engine import compute
from mlopsroi.log import configure_logging


def test_library_is_silent_until_configured(default_inputs):
    messages = []
    logger.add(messages.append, level="DEBUG")
    compute(default_inputs)
    assert messages == []

    configure_logging("debug")
    logger.add(messages.append, level="DEBUG")
    compute(default_inputs)
    assert any("Computed roi=" in str(message) for message in messages)


def test_configure_logging_writes_rotating_file(tmp_path: Path, default_inputs):
    log_file = tmp_path / "logs" / "run.log"
    configure_logging("debug", str(log_file))
    compute(default_inputs)
    assert "Computed roi=" in log_file.read_text(encoding="utf-8")
