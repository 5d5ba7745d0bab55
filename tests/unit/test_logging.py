"""Unit tests for the coloured logging helpers."""

import logging

from motionframe.utils import logging as log


class TestLogging:
    """Test the log helpers."""

    def test_warning_goes_through_package_logger(self, caplog):
        with caplog.at_level(logging.WARNING, logger=log.log.LOGGER_NAME):
            log.warning("frames overlap")
        assert caplog.records[-1].name == "motionframe"
        assert caplog.records[-1].levelno == logging.WARNING
        assert caplog.records[-1].getMessage() == "frames overlap"

    def test_color_is_attached_to_record(self, caplog):
        with caplog.at_level(logging.INFO, logger="motionframe"):
            log.info("resolved", log.GREEN)
        assert caplog.records[-1].color == log.GREEN

    def test_debug_hidden_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="motionframe"):
            log.debug("details")
        assert caplog.text == ""

    def test_handler_added_once(self):
        log.get_logger()
        log.get_logger()
        handlers = [h for h in logging.getLogger("motionframe").handlers
                    if getattr(h, "_motionframe", False)]
        assert len(handlers) == 1

    def test_set_level_accepts_names(self):
        logger = log.get_logger()
        previous = logger.level
        try:
            log.set_level("debug")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
