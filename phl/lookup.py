from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

from .config import Config, load_config
from .country_codes import load_country_codes, validate_country_code
from .data.holiday_cache import (
    CacheStore,
    JsonFileCacheStore,
    lookup_cached,
    reset_cache_if_stale,
    write_cache,
)
from .data.nager_client import NagerClient
from .report.console import print_holidays


def run_lookup(
    *,
    country: str,
    limit: Optional[int] = None,
    cache_file: Optional[str] = None,
    today: Optional[dt.date] = None,
    store: Optional[CacheStore] = None,
    client: Optional[NagerClient] = None,
) -> int:
    """Validate, consult today's cache, fetch on miss, print upcoming holidays.

    Failures are raised as ``HolidayLookupError`` subclasses; the caller maps
    them to an exit status.
    """
    logger = logging.getLogger(__name__)
    cfg: Config = load_config(limit_override=limit, cache_file_override=cache_file)

    valid_codes = load_country_codes(cfg.country_codes_file)
    country_code = validate_country_code(country, valid_codes)

    today = today or dt.date.today()
    store = store or JsonFileCacheStore(cfg.cache_file)

    reset_cache_if_stale(store, today)

    cached = lookup_cached(store, country_code, today)
    if cached is not None:
        logger.info("Using cached data for %s (Date: %s).", country_code, today.isoformat())
        print_holidays(cached.holidays, today, limit=cfg.upcoming_limit)
        return 0

    client = client or NagerClient(cfg.api_base_url, timeout=cfg.request_timeout)
    holidays = client.public_holidays(year=today.year, country_code=country_code)
    logger.debug("Fetched %d holidays for %s/%d", len(holidays), country_code, today.year)

    write_cache(store, country_code, today, holidays)
    print_holidays(holidays, today, limit=cfg.upcoming_limit)
    return 0


__all__ = ["run_lookup"]
