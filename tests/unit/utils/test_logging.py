import logging

from montyhall.utils.logging import configure_logging, setup_info_logging, setup_warning_logging


def test_setup_info_logging_creates_file_and_sets_level(tmp_path, preserve_root_logger):
    log_file = tmp_path / "info.log"
    setup_info_logging(log_file)
    root = logging.getLogger()
    assert log_file.exists()
    assert root.level == logging.INFO


def test_setup_warning_logging_creates_file_and_sets_level(tmp_path, preserve_root_logger):
    log_file = tmp_path / "nested" / "warn.log"
    setup_warning_logging(log_file)
    root = logging.getLogger()
    assert log_file.exists()
    assert root.level == logging.WARNING


def test_configure_logging_numeric_level_and_format(tmp_path, preserve_root_logger):
    log_file = tmp_path / "debug.log"
    configure_logging(level=logging.DEBUG, log_file=log_file)
    logging.getLogger("montyhall.test").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG montyhall.test: hello" in text


def test_handlers_replaced_on_reconfigure(tmp_path, preserve_root_logger):
    log1 = tmp_path / "first.log"
    log2 = tmp_path / "second.log"

    setup_info_logging(log1)
    logging.info("first")
    setup_info_logging(log2)
    logging.info("second")

    root = logging.getLogger()
    assert any(
        isinstance(h, logging.FileHandler) and h.baseFilename == str(log2) for h in root.handlers
    )
    assert not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == str(log1) for h in root.handlers
    )
    assert "first" in log1.read_text()
    assert "second" not in log1.read_text()
