"""Tests for the structured logging setup."""

import logging

import pytest

from bigcalc_pkg.api import clear_caches, evaluate
from bigcalc_pkg.logging_config import (
    StructuredFormatter,
    get_logger,
    resolve_level,
    setup_logging,
)


def make_record(message, context=None):
    record = logging.LogRecord(
        "bigcalc.evaluator", logging.DEBUG, __file__, 1, message, (), None
    )
    if context is not None:
        record.context = context
    return record


@pytest.fixture
def restore_bigcalc_logger():
    logger = logging.getLogger("bigcalc")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


class TestStructuredFormatter:
    def test_plain_record(self):
        line = StructuredFormatter().format(make_record("fold +"))
        assert line.endswith("[DEBUG] bigcalc.evaluator: fold +")

    def test_context_is_sorted_key_value_pairs(self):
        line = StructuredFormatter().format(
            make_record("fold *", {"right_limbs": 1, "left_limbs": 3})
        )
        assert line.endswith("fold * | left_limbs=3 right_limbs=1")


class TestLevels:
    @pytest.mark.parametrize(
        "name, expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR)],
    )
    def test_resolve_level(self, name, expected):
        assert resolve_level(name) == expected

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            resolve_level("chatty")


class TestSetupLogging:
    def test_replaces_handlers(self, restore_bigcalc_logger):
        setup_logging("INFO")
        logger = setup_logging("DEBUG")
        assert logger is restore_bigcalc_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_console_level_is_separate(self, restore_bigcalc_logger, tmp_path):
        log_file = tmp_path / "bigcalc.log"
        logger = setup_logging("DEBUG", log_file=str(log_file), console_level="WARNING")
        console, file_handler = logger.handlers
        assert console.level == logging.WARNING
        assert file_handler.level == logging.NOTSET

        clear_caches()
        evaluate("(123+1)*(4-1)")
        file_handler.flush()
        text = log_file.read_text()
        assert "fold +" in text
        assert "result_limbs=1" in text

    def test_failures_logged_with_code(self, restore_bigcalc_logger, caplog):
        setup_logging("INFO")
        with caplog.at_level(logging.INFO, logger="bigcalc"):
            evaluate("1+(2")
        record = caplog.records[-1]
        assert record.name == "bigcalc.api"
        assert record.context == {"code": "UNBALANCED_PARENS", "position": 2}


def test_get_logger_namespace():
    assert get_logger("cli").name == "bigcalc.cli"
