"""Tests for logging infrastructure."""
import logging

import pytest

from shiftgrid.utils.logging_setup import (
    ROOT_LOGGER,
    TRACE,
    get_default_logger,
    get_logger,
    init_logging,
    log_function_call,
    setup_logging,
)
from shiftgrid.utils.structured_logging import (
    bind_context,
    clear_context,
    configure_structlog,
    get_structured_logger,
)


@pytest.fixture(autouse=True)
def reset_logger():
    """Detach handlers added by setup_logging."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestLoggingSetup:
    """Tests for logging configuration."""

    def test_setup_logging_creates_logger(self, tmp_path):
        """setup_logging returns the package logger with two handlers."""
        logger = setup_logging(level="DEBUG", log_file=str(tmp_path / "test.log"))

        assert logger.name == "shiftgrid"
        assert len(logger.handlers) == 2  # Console + file

    def test_setup_logging_creates_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "test.log"
        logger = setup_logging(level="DEBUG", log_file=str(log_file))
        logger.info("Test message")

        assert log_file.exists()
        assert "Test message" in log_file.read_text(encoding="utf-8")

    def test_setup_logging_no_file(self):
        logger = setup_logging(level="INFO", log_file=None)

        assert len(logger.handlers) == 1  # Console only

    def test_trace_level(self):
        assert TRACE == 5
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_trace_level_name_accepted(self):
        logger = setup_logging(level="TRACE")
        assert logger.handlers[0].level == TRACE

    def test_get_logger(self):
        assert get_logger("shiftgrid.grid.builder").name == "shiftgrid.grid.builder"

    def test_init_and_default_logger(self):
        logger = init_logging(level="WARNING")
        assert get_default_logger() is logger


class TestLogFunctionCall:
    """Tests for the call-tracing decorator."""

    def test_decorator_logs_entry_exit(self, caplog):
        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(TRACE, logger=__name__):
            result = add(1, 2)

        assert result == 3
        assert "→ add(1, 2)" in caplog.text
        assert "← add returned: 3" in caplog.text

    def test_decorator_logs_exceptions(self, caplog):
        @log_function_call
        def fail():
            raise ValueError("test error")

        with caplog.at_level(TRACE, logger=__name__):
            with pytest.raises(ValueError):
                fail()

        assert "fail raised: ValueError: test error" in caplog.text

    def test_decorator_silent_above_trace(self, caplog):
        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG, logger=__name__):
            assert add(2, 2) == 4
        assert "→" not in caplog.text

    def test_decorator_preserves_function_name(self):
        @log_function_call
        def my_function():
            """Docstring."""

        assert my_function.__name__ == "my_function"
        assert my_function.__doc__ == "Docstring."


class TestLogRotation:
    """Tests for log file rotation."""

    def test_rotation_on_size(self, tmp_path):
        log_file = tmp_path / "test.log"
        logger = setup_logging(level="DEBUG", log_file=str(log_file), max_bytes=1000, backup_count=2)

        for i in range(100):
            logger.info(f"Message {i}: " + "x" * 50)

        assert log_file.exists()
        assert len(list(tmp_path.glob("test.log.*"))) == 2


class TestStructuredLogging:
    """Tests for the structlog configuration."""

    def test_json_output(self, capsys):
        configure_structlog(json_output=True)
        log = get_structured_logger("shiftgrid.test")
        bind_context(source="roster.json")
        try:
            log.info("grid_rendered", rows=3)
        finally:
            clear_context()

        err = capsys.readouterr().err
        assert '"event": "grid_rendered"' in err
        assert '"rows": 3' in err
        assert '"source": "roster.json"' in err

    def test_level_filtering(self, capsys):
        configure_structlog(json_output=True, level=logging.ERROR)
        get_structured_logger("shiftgrid.test").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_clear_context(self, capsys):
        configure_structlog(json_output=True)
        bind_context(source="a.json")
        clear_context()
        get_structured_logger("shiftgrid.test").warning("after_clear")
        assert "a.json" not in capsys.readouterr().err
