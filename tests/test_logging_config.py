import logging

from algebrapad.logging_config import setup_logging
from algebrapad.model.document import Document


def test_setup_logging_writes_edits_to_file(tmp_path):
    log_file = tmp_path / "editor.log"
    logger = logging.getLogger("algebrapad")
    try:
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        assert len(logger.handlers) == 2

        document = Document()
        document.type_text("1")
        document.type_text("/")

        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in content
        assert "algebrapad.model.document - DEBUG - Created fraction" in content
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
