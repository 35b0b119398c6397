from __future__ import annotations

import datetime as dt
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from ..errors import FileAccessError

logger = logging.getLogger(__name__)


class CacheFormatError(ValueError):
    """Cache document does not have the expected shape."""


def _require_str(raw: Dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise CacheFormatError(f"field '{key}' must be a string")
    return value


def _require_str_list(value: Any, key: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise CacheFormatError(f"field '{key}' must be a list of strings")
    return list(value)


def _require_dict(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise CacheFormatError(f"{what} must be an object")
    return value


@dataclass
class Holiday:
    date: str
    name: str
    counties: Optional[List[str]]
    types: List[str]

    @property
    def is_national(self) -> bool:
        return self.counties is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "name": self.name,
            "counties": list(self.counties) if self.counties is not None else None,
            "types": list(self.types),
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "Holiday":
        raw = _require_dict(raw, "holiday")
        counties_raw = raw.get("counties")
        counties = None if counties_raw is None else _require_str_list(counties_raw, "counties")
        return cls(
            date=_require_str(raw, "date"),
            name=_require_str(raw, "name"),
            counties=counties,
            types=_require_str_list(raw.get("types"), "types"),
        )


@dataclass
class CachedData:
    country_code: str
    date: str
    holidays: List[Holiday] = field(default_factory=list)

    def matches(self, country_code: str, date: str) -> bool:
        return self.country_code == country_code and self.date == date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "country_code": self.country_code,
            "date": self.date,
            "holidays": [h.to_dict() for h in self.holidays],
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "CachedData":
        raw = _require_dict(raw, "cache entry")
        holidays_raw = raw.get("holidays")
        if not isinstance(holidays_raw, list):
            raise CacheFormatError("field 'holidays' must be a list")
        return cls(
            country_code=_require_str(raw, "country_code"),
            date=_require_str(raw, "date"),
            holidays=[Holiday.from_dict(h) for h in holidays_raw],
        )


@dataclass
class FullCache:
    date: str
    data: List[CachedData] = field(default_factory=list)

    @classmethod
    def empty(cls, today: dt.date) -> "FullCache":
        return cls(date=today.isoformat(), data=[])

    def find(self, country_code: str, date: str) -> Optional[CachedData]:
        for entry in self.data:
            if entry.matches(country_code, date):
                return entry
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "data": [entry.to_dict() for entry in self.data]}

    @classmethod
    def from_dict(cls, raw: Any) -> "FullCache":
        raw = _require_dict(raw, "cache")
        data_raw = raw.get("data")
        if not isinstance(data_raw, list):
            raise CacheFormatError("field 'data' must be a list")
        return cls(
            date=_require_str(raw, "date"),
            data=[CachedData.from_dict(entry) for entry in data_raw],
        )


# ----------------------------------------------------------------------
# Stores
# ----------------------------------------------------------------------
class CacheStore(Protocol):
    @property
    def label(self) -> str: ...

    def read_text(self) -> str: ...

    def write_text(self, text: str) -> None: ...


class JsonFileCacheStore:
    """Cache document persisted as a single JSON file."""

    def __init__(self, path: str):
        self.path = path

    @property
    def label(self) -> str:
        return self.path

    def read_text(self) -> str:
        with open(self.path, "r", encoding="utf-8") as fp:
            return fp.read()

    def write_text(self, text: str) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fp:
            fp.write(text)


class MemoryCacheStore:
    """In-process store; behaves like a file that may not exist yet."""

    def __init__(self, text: Optional[str] = None, label: str = "<memory>"):
        self.text = text
        self._label = label
        self.writes = 0

    @property
    def label(self) -> str:
        return self._label

    def read_text(self) -> str:
        if self.text is None:
            raise FileNotFoundError(self._label)
        return self.text

    def write_text(self, text: str) -> None:
        self.text = text
        self.writes += 1


def _parse(text: str) -> FullCache:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CacheFormatError(str(exc)) from exc
    return FullCache.from_dict(raw)


def load_cache(store: CacheStore) -> FullCache:
    """Read and parse the cache document.

    Raises ``OSError`` when the store cannot be read and ``CacheFormatError``
    when the content is not a valid cache document.
    """
    try:
        text = store.read_text()
    except UnicodeDecodeError as exc:
        raise CacheFormatError(str(exc)) from exc
    return _parse(text)


def save_cache(store: CacheStore, cache: FullCache) -> None:
    payload = json.dumps(cache.to_dict(), indent=2, ensure_ascii=False)
    try:
        store.write_text(payload)
    except OSError as exc:
        raise FileAccessError(store.label, exc) from exc


# ----------------------------------------------------------------------
# Operations
# ----------------------------------------------------------------------
def reset_cache_if_stale(store: CacheStore, today: dt.date) -> bool:
    """Clear the cache when it was written on another day.

    A missing or unreadable cache is (re)created empty. Unparseable content is
    left untouched. Returns True when the store was written.
    """
    try:
        cache = load_cache(store)
    except OSError:
        save_cache(store, FullCache.empty(today))
        return True
    except CacheFormatError as exc:
        logger.debug("Cache reset skipped, content unparseable: %s", exc)
        return False

    if cache.date == today.isoformat():
        return False

    logger.info("New day detected. Resetting cache...")
    save_cache(store, FullCache.empty(today))
    return True


def lookup_cached(store: CacheStore, country_code: str, today: dt.date) -> Optional[CachedData]:
    try:
        cache = load_cache(store)
    except OSError:
        logger.warning(
            "Cache file could not be opened or does not exist. Proceeding with API request."
        )
        return None
    except CacheFormatError:
        logger.warning("Cache file exists but could not be parsed. Ignoring cache.")
        return None
    return cache.find(country_code, today.isoformat())


def write_cache(
    store: CacheStore,
    country_code: str,
    today: dt.date,
    holidays: List[Holiday],
) -> bool:
    """Append today's holidays for ``country_code``; no-op if already present."""
    try:
        cache = load_cache(store)
    except (OSError, CacheFormatError):
        cache = FullCache.empty(today)

    today_str = today.isoformat()
    if cache.find(country_code, today_str) is not None:
        logger.info("Cache already contains data for %s on %s.", country_code, today_str)
        return False

    cache.data.append(
        CachedData(country_code=country_code, date=today_str, holidays=list(holidays))
    )
    save_cache(store, cache)
    logger.info("Cache updated successfully for %s.", country_code)
    return True


__all__ = [
    "CacheFormatError",
    "CacheStore",
    "Holiday",
    "CachedData",
    "FullCache",
    "JsonFileCacheStore",
    "MemoryCacheStore",
    "load_cache",
    "save_cache",
    "reset_cache_if_stale",
    "lookup_cached",
    "write_cache",
]
