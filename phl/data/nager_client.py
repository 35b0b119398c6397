from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..errors import ErrorKind, HolidayClientError, HolidayHTTPError
from .holiday_cache import CacheFormatError, Holiday

DEFAULT_BASE_URL = "https://date.nager.at"

logger = logging.getLogger(__name__)


class NagerClient:
    """Minimal HTTP client for the Nager.Date public holiday API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def public_holidays_url(self, year: int, country_code: str) -> str:
        return f"{self.base_url}/api/v3/publicholidays/{year}/{country_code}"

    def public_holidays(self, *, year: int, country_code: str) -> list[Holiday]:
        url = self.public_holidays_url(year, country_code)
        logger.debug("GET %s", url)

        # single attempt, no retries
        try:
            resp = self.session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.ConnectionError as exc:
            raise HolidayClientError(
                "Network error: Unable to connect to the API. "
                "Please check your internet connection.",
                kind=ErrorKind.CONNECTION,
            ) from exc
        except requests.Timeout as exc:
            raise HolidayClientError(
                "Request timed out: Please try again later.",
                kind=ErrorKind.TIMEOUT,
            ) from exc
        except requests.RequestException as exc:
            raise HolidayClientError(
                f"Unexpected error occurred while connecting to the API: {exc}",
                kind=ErrorKind.TRANSPORT_OTHER,
            ) from exc

        if not 200 <= resp.status_code < 300:
            raise HolidayHTTPError(resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise HolidayClientError(
                "Public holiday response is not JSON", kind=ErrorKind.INVALID_RESPONSE
            ) from exc

        return _parse_holidays(data)


def _parse_holidays(data: Any) -> list[Holiday]:
    if not isinstance(data, list):
        raise HolidayClientError(
            "Public holiday response is not a list", kind=ErrorKind.INVALID_RESPONSE
        )
    try:
        return [Holiday.from_dict(item) for item in data]
    except CacheFormatError as exc:
        raise HolidayClientError(
            f"Unexpected holiday record in response: {exc}",
            kind=ErrorKind.INVALID_RESPONSE,
        ) from exc


__all__ = ["DEFAULT_BASE_URL", "NagerClient"]
