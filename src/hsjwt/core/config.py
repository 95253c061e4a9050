from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

ENV_PREFIX = "HSJWT_"
DEFAULT_TOKEN_TTL_SECONDS = 3600


@dataclass(frozen=True)
class Settings:
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    issuer: str = ""
    audience: str = ""


def _read_dotenv(path: Path) -> dict[str, str]:
    """Collect ``HSJWT_*`` entries from a ``.env`` file without exporting them."""
    if not path.is_file():
        return {}
    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = raw_line.strip().partition("=")
        key = key.strip()
        if not sep or not key.startswith(ENV_PREFIX):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key] = value
    return values


def _token_ttl(raw: str | None) -> int:
    try:
        ttl = int((raw or "").strip())
    except ValueError:
        return DEFAULT_TOKEN_TTL_SECONDS
    return ttl if ttl > 0 else DEFAULT_TOKEN_TTL_SECONDS


def settings_from_mapping(values: Mapping[str, str]) -> Settings:
    return Settings(
        token_ttl_seconds=_token_ttl(values.get("HSJWT_TOKEN_TTL_SECONDS")),
        issuer=values.get("HSJWT_ISSUER", "").strip(),
        audience=values.get("HSJWT_AUDIENCE", "").strip(),
    )


def get_settings() -> Settings:
    # Process environment wins over a .env file in the working directory.
    values = _read_dotenv(Path.cwd() / ".env")
    values.update({key: value for key, value in os.environ.items() if key.startswith(ENV_PREFIX)})
    return settings_from_mapping(values)


get_settings = lru_cache(maxsize=1)(get_settings)


def clear_settings_cache() -> None:
    get_settings.cache_clear()  # type: ignore[attr-defined]
