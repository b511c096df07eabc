import json
import logging
import sys

import pytest

from curve25519_signing.crypto import generate_keypair, sign
from curve25519_signing.utils import JsonFormatter, configure_logging, get_logger


def _reset_root() -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)


def test_json_formatter_outputs_structured_record() -> None:
    record = logging.LogRecord("sig", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["name"] == "sig"
    assert payload["message"] == "hello world"
    assert "time" in payload
    assert "exc_info" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("sig", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_logging_uses_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    try:
        configure_logging()
        assert logging.getLogger().level == logging.ERROR
        configure_logging(level="debug", json_output=True)
        assert logging.getLogger().level == logging.DEBUG
        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)
    finally:
        _reset_root()


def test_crypto_logs_never_contain_key_material(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("curve25519_signing")
    assert logger is logging.getLogger("curve25519_signing")
    with caplog.at_level(logging.DEBUG, logger="curve25519_signing"):
        kp = generate_keypair()
        sig = sign(b"payload", kp.private_key)
    assert caplog.records
    for record in caplog.records:
        message = record.getMessage()
        assert kp.private_key.hex() not in message
        assert sig.hex() not in message


def test_json_formatter_stamps_utc_time() -> None:
    record = logging.LogRecord("sig", logging.INFO, __file__, 1, "tick", (), None)
    record.created = 0.0
    payload = json.loads(JsonFormatter().format(record))
    assert payload["time"] == "1970-01-01T00:00:00Z"
