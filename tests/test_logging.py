import logging

import pytest
import structlog
from opentelemetry.instrumentation.logging import LoggingInstrumentor

from core.logging import BusinessEvents, configure_logging, get_log_level, get_log_renderer


class _TestLogger:
    def __init__(self):
        self.output = []

    def __call__(self, logger, method_name, event_dict):
        """Process log events and store them for test assertions"""
        self.output.append(event_dict.copy())
        return event_dict


@pytest.fixture(autouse=True)
def reset_structlog():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    structlog.reset_defaults()
    LoggingInstrumentor().uninstrument()
    root_logger.handlers = handlers
    root_logger.setLevel(level)


def test_structlog_json():
    test_logger = _TestLogger()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            test_logger,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    logging.getLogger().setLevel(logging.INFO)

    log = structlog.get_logger("test")
    log.bind(family="nvp").info(BusinessEvents.GATEWAY_REQUEST)

    assert len(test_logger.output) > 0
    log_dict = test_logger.output[-1]

    assert log_dict["family"] == "nvp"
    assert log_dict["event"] == "gateway.request"
    assert "timestamp" in log_dict
    assert log_dict["level"] == "info"


def test_renderer_depends_on_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    assert isinstance(get_log_renderer(), structlog.processors.JSONRenderer)

    monkeypatch.setenv("ENVIRONMENT", "development")
    assert isinstance(get_log_renderer(), structlog.dev.ConsoleRenderer)


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"

    monkeypatch.delenv("LOG_LEVEL")
    assert get_log_level() == "INFO"


def test_configure_logging_writes_json_to_stdout_in_test_mode(capsys, monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    configure_logging()
    structlog.get_logger("payments.nvp_client").info(
        BusinessEvents.GATEWAY_SUCCESS, family="payflow", status="0"
    )

    out = capsys.readouterr().out
    line = next(line for line in out.splitlines() if line.startswith("{"))
    assert '"event": "gateway.success"' in line
    assert '"family": "payflow"' in line
    assert logging.getLogger("urllib3").level == logging.WARNING
