import pytest

from hsjwt.core.config import clear_settings_cache

ENV_NAMES = ("HSJWT_TOKEN_TTL_SECONDS", "HSJWT_ISSUER", "HSJWT_AUDIENCE", "HSJWT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_NAMES:
        # setenv first so values injected by the .env loader are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    clear_settings_cache()
    yield
    clear_settings_cache()
