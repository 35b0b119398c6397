from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

from .config_loader import load_yaml_config
from .country_codes import BUNDLED_COUNTRY_CODES
from .data.nager_client import DEFAULT_BASE_URL


def _from_nested(d: dict[str, Any], path: str, default: Any = None) -> Any:
    current: Any = d
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


@dataclass(frozen=True)
class Config:
    cache_file: str = "holidays_cache.json"
    country_codes_file: str = BUNDLED_COUNTRY_CODES
    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 10.0
    upcoming_limit: int = 5


def _normalize_base_url(url: str | None) -> str:
    if not url:
        return DEFAULT_BASE_URL
    url = url.strip()
    if not url:
        return DEFAULT_BASE_URL
    if not url.startswith("http://") and not url.startswith("https://"):
        url = f"https://{url}"
    return url.rstrip("/")


def load_config(
    *,
    limit_override: int | None = None,
    cache_file_override: str | None = None,
) -> Config:
    yaml_cfg = load_yaml_config().raw
    load_dotenv(override=False)

    def from_yaml(path: str, default: Any = None) -> Any:
        return _from_nested(yaml_cfg, path, default)

    def parse_int(val: Any, default: int) -> int:
        try:
            return int(val)
        except (TypeError, ValueError):
            return default

    def parse_float(val: Any, default: float) -> float:
        try:
            return float(val)
        except (TypeError, ValueError):
            return default

    def env_int(key: str, path: str, default: int) -> int:
        env_val = os.getenv(key)
        if env_val is not None:
            return parse_int(env_val, default)
        return parse_int(from_yaml(path, default), default)

    def env_float(key: str, path: str, default: float) -> float:
        env_val = os.getenv(key)
        if env_val is not None:
            return parse_float(env_val, default)
        return parse_float(from_yaml(path, default), default)

    def env_str(key: str, path: str, default: str) -> str:
        env_val = os.getenv(key)
        if env_val:
            return env_val
        val = from_yaml(path, default)
        if val is None:
            return default
        return str(val)

    limit_cfg = env_int("UPCOMING_LIMIT", "display.limit", 5)
    upcoming_limit = limit_override if limit_override is not None else limit_cfg
    if upcoming_limit < 0:
        upcoming_limit = 0

    timeout = env_float("REQUEST_TIMEOUT", "api.timeout_seconds", 10.0)
    if timeout <= 0:
        timeout = 10.0

    cache_file = cache_file_override or env_str(
        "HOLIDAY_CACHE_FILE", "cache.file", "holidays_cache.json"
    )

    return Config(
        cache_file=cache_file,
        country_codes_file=env_str(
            "COUNTRY_CODES_FILE", "files.country_codes", BUNDLED_COUNTRY_CODES
        ),
        api_base_url=_normalize_base_url(os.getenv("NAGER_BASE_URL") or from_yaml("api.base_url")),
        request_timeout=timeout,
        upcoming_limit=upcoming_limit,
    )
