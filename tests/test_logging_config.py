"""
Tests for structured logging configuration
"""

import json
import logging

from transfer_money.logging_config import JSONFormatter, setup_logging, get_logger, log_action


class TestJSONFormatter:
    """Test JSON log formatting"""

    def _record(self, **fields):
        record = logging.LogRecord("transfer_money.test", logging.INFO, __file__, 1,
                                   "Transfer %s", ("ok",), None)
        for key, value in fields.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        """Test required fields are present and None values dropped"""
        entry = json.loads(JSONFormatter().format(self._record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "transfer_money.test"
        assert entry["message"] == "Transfer ok"
        assert "timestamp" in entry
        assert "action" not in entry

    def test_structured_fields(self):
        """Test action, resource and extra"""
        record = self._record(action="transfer", resource="a -> b", extra={"amount": "5"})
        entry = json.loads(JSONFormatter().format(record))

        assert entry["action"] == "transfer"
        assert entry["resource"] == "a -> b"
        assert entry["extra"] == {"amount": "5"}


class TestSetupLogging:
    """Test logger setup"""

    def test_json_handler(self):
        """Test the default handler uses JSON"""
        logger = setup_logging("DEBUG", "transfer_money_test_json")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_text_handler_and_no_duplicates(self):
        """Test text format and repeated setup"""
        setup_logging("INFO", "transfer_money_test_text", log_format="text")
        logger = setup_logging("WARNING", "transfer_money_test_text", log_format="text")

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.WARNING

    def test_get_logger(self):
        """Test logger lookup"""
        assert get_logger("transfer_money.x") is logging.getLogger("transfer_money.x")


class TestLogAction:
    """Test structured action logging"""

    def test_log_action_fields(self, caplog):
        """Test fields are attached to the record"""
        logger = get_logger("transfer_money_test_action")

        with caplog.at_level(logging.INFO, logger="transfer_money_test_action"):
            log_action(logger, "info", "Transfer completed", action="transfer",
                       resource="a -> b", extra={"amount": "1"})

        record = caplog.records[-1]
        assert record.getMessage() == "Transfer completed"
        assert record.action == "transfer"
        assert record.resource == "a -> b"
        assert record.extra == {"amount": "1"}

    def test_log_action_respects_level(self, caplog):
        """Test records below the logger level are dropped"""
        logger = get_logger("transfer_money_test_level")

        with caplog.at_level(logging.WARNING, logger="transfer_money_test_level"):
            log_action(logger, "info", "hidden")

        assert caplog.records == []
