import sys

import pytest
from loguru import logger

from webclip.config import settings
from webclip.utils.logger import get_logger, setup_logging


@pytest.fixture
def log_file(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "webclip.log"
    monkeypatch.setattr(settings, "log_file", str(path))
    monkeypatch.setattr(settings, "log_level", "DEBUG")
    yield path
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_records_module_name(log_file):
    setup_logging()
    get_logger("webclip.extractor.candidate").debug("chose article")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "webclip.extractor.candidate" in content
    assert "chose article" in content


def test_console_stays_quiet_below_warning(log_file, capsys):
    setup_logging()
    log = get_logger("webclip.scraper")
    log.info("loading page")
    log.warning("rule failed")
    logger.remove()

    err = capsys.readouterr().err
    assert "loading page" not in err
    assert "rule failed" in err
    assert "webclip.scraper" in err


def test_console_level_override(log_file, capsys):
    setup_logging("debug")
    get_logger("webclip.scraper").info("loading page")
    logger.remove()

    assert "loading page" in capsys.readouterr().err


def test_unbound_records_get_default_name(log_file):
    setup_logging()
    logger.info("plain record")
    logger.remove()

    assert "| webclip:test_unbound_records_get_default_name" in log_file.read_text(encoding="utf-8")
