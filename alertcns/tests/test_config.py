from __future__ import annotations

import logging

from alertcns.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "REDACT_LOGS", "CONTENT_PACK", "SESSION_KEY"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.redact_logs is True
    assert settings.content_pack == "stepdown"
    assert settings.session_key == "alertToolState_v_flag_v1"


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert Settings(_env_file=None).log_level_value == logging.INFO
