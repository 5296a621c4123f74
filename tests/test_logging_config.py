import importlib
import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_logging_state():
    yield
    import solution_content.logging_config as logging_config

    logging_config._configured = False
    logging_config._logfire_ready = False


def _reload_logging_config(monkeypatch, use_logfire: bool, token: str = ""):
    monkeypatch.setenv("USE_LOGFIRE", "true" if use_logfire else "false")
    if token:
        monkeypatch.setenv("LOGFIRE_TOKEN", token)
    else:
        monkeypatch.delenv("LOGFIRE_TOKEN", raising=False)

    import solution_content.logging_config as logging_config

    return importlib.reload(logging_config)


def test_setup_logging_without_logfire_only_configures_stdlib(monkeypatch):
    lc = _reload_logging_config(monkeypatch, use_logfire=False)

    calls = []
    monkeypatch.setattr(lc.logfire, "configure", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(lc.logging, "basicConfig", lambda **kwargs: calls.append(("basic", kwargs)))

    lc.setup_logging(service_name="test-service", level="debug")

    assert len(calls) == 1
    assert calls[0][1]["level"] == logging.DEBUG
    assert lc.logfire_enabled() is False


def test_setup_logging_skips_logfire_without_token(monkeypatch):
    lc = _reload_logging_config(monkeypatch, use_logfire=True)

    configured = []
    monkeypatch.setattr(lc.logfire, "configure", lambda **kwargs: configured.append(kwargs))
    monkeypatch.setattr(lc.logging, "basicConfig", lambda **kwargs: None)

    lc.setup_logging(service_name="test-service")

    assert configured == []
    assert lc.logfire_enabled() is False


def test_setup_logging_configures_logfire_with_token(monkeypatch):
    lc = _reload_logging_config(monkeypatch, use_logfire=True, token="secret")

    configured = []
    basic = []
    monkeypatch.setattr(lc.logfire, "configure", lambda **kwargs: configured.append(kwargs))
    monkeypatch.setattr(lc.logfire, "LogfireLoggingHandler", lambda: logging.NullHandler())
    monkeypatch.setattr(lc.logging, "basicConfig", lambda **kwargs: basic.append(kwargs))

    lc.setup_logging(service_name="test-service")
    lc.setup_logging(service_name="ignored-second-call")

    assert configured[0]["service_name"] == "test-service"
    assert len(configured) == 1
    assert len(basic[0]["handlers"]) == 2
    assert lc.logfire_enabled() is True


def test_content_logger_span_logs_failures_and_reraises(monkeypatch, caplog):
    lc = _reload_logging_config(monkeypatch, use_logfire=False)
    logger = lc.get_logger("tests.span")

    with caplog.at_level(logging.DEBUG, logger="tests.span"):
        with logger.span("ok-operation"):
            pass
        with pytest.raises(ValueError):
            with logger.span("bad-operation"):
                raise ValueError("boom")

    messages = [record.getMessage() for record in caplog.records]
    assert any("ok-operation completed" in message for message in messages)
    assert any("bad-operation failed" in message and "ValueError: boom" in message for message in messages)
