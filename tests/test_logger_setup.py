import sys

from loguru import logger

from cannonevo.utils.logger_setup import setup_logger


def test_setup_logger_writes_plain_text_to_file(tmp_path):
    log_file = setup_logger(tmp_path / "logs", level="DEBUG")
    try:
        logger.info("hello from test")
        logger.complete()
        assert log_file.parent == tmp_path / "logs"
        assert log_file.name.startswith("cannonevo_")
        text = log_file.read_text(encoding="utf-8")
        assert "hello from test" in text
        assert "<green>" not in text
    finally:
        logger.remove()
        logger.add(sys.stderr)
