import io
import logging
import os

from hsjwt.core import logging as hsjwt_logging
from hsjwt.core.config import Settings, get_settings, settings_from_mapping
from hsjwt.core.logging import _resolve_log_level


def test_get_settings_defaults():
    assert get_settings() == Settings()


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("HSJWT_TOKEN_TTL_SECONDS", "900")
    monkeypatch.setenv("HSJWT_ISSUER", " whoyou.io ")
    monkeypatch.setenv("HSJWT_AUDIENCE", "api")
    settings = get_settings()
    assert settings.token_ttl_seconds == 900
    assert settings.issuer == "whoyou.io"
    assert settings.audience == "api"


def test_settings_from_mapping_ignores_invalid_ttl():
    assert settings_from_mapping({"HSJWT_TOKEN_TTL_SECONDS": "soon"}).token_ttl_seconds == 3600
    assert settings_from_mapping({"HSJWT_TOKEN_TTL_SECONDS": "-5"}).token_ttl_seconds == 3600


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("HSJWT_ISSUER", "later.io")
    assert get_settings() is first


def test_get_settings_reads_dotenv_without_exporting(tmp_path):
    (tmp_path / ".env").write_text(
        "# token settings\nHSJWT_ISSUER='dotenv.io'\nHSJWT_TOKEN_TTL_SECONDS=60\nOTHER_SECRET=leak\n",
        encoding="utf-8",
    )
    settings = get_settings()
    assert settings.issuer == "dotenv.io"
    assert settings.token_ttl_seconds == 60
    assert "HSJWT_ISSUER" not in os.environ
    assert "OTHER_SECRET" not in os.environ


def test_environment_overrides_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("HSJWT_ISSUER=dotenv.io\n", encoding="utf-8")
    monkeypatch.setenv("HSJWT_ISSUER", "env.io")
    assert get_settings().issuer == "env.io"


def test_resolve_log_level(monkeypatch):
    assert _resolve_log_level() == logging.WARNING
    monkeypatch.setenv("HSJWT_LOG_LEVEL", "debug")
    assert _resolve_log_level() == logging.DEBUG
    monkeypatch.setenv("HSJWT_LOG_LEVEL", "chatty")
    assert _resolve_log_level() == logging.WARNING


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("hsjwt").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_configure_logging_touches_only_package_logger(monkeypatch):
    package_logger = logging.getLogger("hsjwt")
    root_handlers = list(logging.getLogger().handlers)
    previous_level = package_logger.level
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    monkeypatch.setattr(hsjwt_logging, "_CONFIGURED", False)
    monkeypatch.setenv("HSJWT_LOG_LEVEL", "DEBUG")
    try:
        assert hsjwt_logging.configure_logging(handler) is package_logger
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger().handlers == root_handlers

        monkeypatch.setenv("HSJWT_LOG_LEVEL", "ERROR")
        hsjwt_logging.configure_logging()
        assert package_logger.level == logging.DEBUG

        logging.getLogger("hsjwt.core.tokens").debug("rejected token")
        assert "DEBUG [hsjwt.core.tokens] rejected token" in stream.getvalue()
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
