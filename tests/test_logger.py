"""Tests for loguru sink configuration."""
import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from loguru import logger

from envtools.config.logger import configure_logging


@pytest.fixture(autouse=True)
def reset_handlers():
    yield
    # Put loguru's stock stderr handler back
    logger.remove()
    logger.add(sys.stderr)


def test_console_level_filters_messages(capsys):
    configure_logging(level="WARNING")

    logger.info("hidden message")
    logger.warning("shown message")

    err = capsys.readouterr().err
    assert "shown message" in err
    assert "hidden message" not in err


def test_level_read_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("ENVTOOLS_LOG_LEVEL", "error")
    configure_logging(level=None)
    capsys.readouterr()

    logger.warning("quiet warning")
    logger.error("loud error")

    err = capsys.readouterr().err
    assert "loud error" in err
    assert "quiet warning" not in err


def test_log_file_receives_debug_output(tmp_path):
    log_file = tmp_path / "logs" / "envtools.log"
    configure_logging(level="INFO", log_file=log_file)

    logger.debug("debug detail")
    logger.remove()  # flush and close the file sink

    content = log_file.read_text(encoding="utf-8")
    assert "debug detail" in content
    assert "DEBUG" in content


def test_lowercase_level_is_accepted(capsys):
    configure_logging(level="warning")

    logger.info("hidden message")
    logger.warning("shown message")

    err = capsys.readouterr().err
    assert "shown message" in err
    assert "hidden message" not in err


def test_invalid_level_keeps_existing_handlers():
    lines = []
    logger.add(lambda message: lines.append(message.record["message"]), level="DEBUG")

    with pytest.raises(ValueError):
        configure_logging(level="LOUD")

    logger.warning("still visible")
    assert lines == ["still visible"]
