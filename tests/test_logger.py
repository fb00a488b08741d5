# File: tests/test_logger.py
import logging

from indexscraper.logger import configure, configure_scraper, logger, progress


def test_configure_adds_file_handler(tmp_path):
    log_file = tmp_path / "scraper.log"
    lg = configure(level="DEBUG", log_file=log_file)
    lg.debug("stashed %s", "http://example.com/a")
    for handler in lg.handlers:
        handler.flush()

    assert "stashed http://example.com/a" in log_file.read_text(encoding="utf-8")
    assert lg is logger
    assert lg.level == logging.DEBUG
    assert lg.propagate is False


def test_configure_replaces_handlers():
    configure()
    configure()
    assert len(logger.handlers) == 1


def test_scraper_levels():
    configure_scraper(verbose=True)
    assert logger.level == logging.INFO
    configure_scraper(verbose=False)
    assert logger.level == logging.WARNING


def test_progress_level_follows_verbose(log_capture):
    progress(True, "Getting %s", "http://example.com/a")
    progress(False, "Getting %s", "http://example.com/b")

    assert log_capture.messages(logging.INFO) == ["Getting http://example.com/a"]
    assert log_capture.messages(logging.DEBUG) == ["Getting http://example.com/b"]
