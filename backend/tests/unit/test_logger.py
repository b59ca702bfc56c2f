"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from cadastro.core.logger import JSONFormatter, configure_logging, ensure_request_id


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("cadastro.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    configure_logging("DEBUG")

    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_falls_back_to_info() -> None:
    configure_logging("LOUD")

    assert logging.getLogger().level == logging.INFO


def test_configure_logging_quiets_urllib3() -> None:
    configure_logging("DEBUG")

    assert logging.getLogger("urllib3").level == logging.WARNING


def test_json_formatter_keeps_structured_extras() -> None:
    line = JSONFormatter().format(_record(request_id="r-1", code="invalid_cpf", cep="01310100"))

    payload = json.loads(line)
    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "r-1"
    assert payload["code"] == "invalid_cpf"
    assert payload["cep"] == "01310100"
    assert "unrelated" not in payload


def test_json_formatter_keeps_accents() -> None:
    record = logging.LogRecord("cadastro.test", logging.INFO, __file__, 1, "São Paulo", (), None)

    assert "São Paulo" in JSONFormatter().format(record)


def test_request_id_outside_request_is_fresh() -> None:
    assert ensure_request_id() != ensure_request_id()
