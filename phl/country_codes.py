from __future__ import annotations

import os

from .errors import FileAccessError, InvalidCountryCodeError, MalformedResourceError

BUNDLED_COUNTRY_CODES = os.path.join(os.path.dirname(__file__), "data", "country_codes.txt")


def load_country_codes(path: str) -> list[str]:
    """Read the accepted country codes, one per line, upper-cased."""
    try:
        with open(path, encoding="utf-8") as f:
            codes: list[str] = []
            for line in f:
                code = line.strip()
                if not code or code.startswith("#"):
                    continue
                codes.append(code.upper())
    except UnicodeDecodeError as exc:
        raise MalformedResourceError(f"Country code file '{path}' is not valid UTF-8") from exc
    except OSError as exc:
        raise FileAccessError(path, exc) from exc

    if not codes:
        raise MalformedResourceError(f"Country code file '{path}' contains no country codes")
    return codes


def normalize_country_code(raw: str) -> str:
    return raw.strip().upper()


def validate_country_code(raw: str, valid_codes: list[str]) -> str:
    code = normalize_country_code(raw)
    if code not in valid_codes:
        raise InvalidCountryCodeError(code, valid_codes)
    return code


__all__ = [
    "BUNDLED_COUNTRY_CODES",
    "load_country_codes",
    "normalize_country_code",
    "validate_country_code",
]
