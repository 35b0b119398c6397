from __future__ import annotations

import argparse
import logging
import os
import sys

from .errors import HolidayLookupError
from .lookup import run_lookup


def _configure_logging() -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s - %(message)s")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="phl", description="Public holiday lookup — next upcoming holidays"
    )
    p.add_argument("country", type=str, help="Country code, e.g. US or de")
    p.add_argument("--limit", type=int, default=None, help="Max upcoming holidays to print")
    p.add_argument("--cache-file", type=str, default=None, help="Path to the cache file")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    _configure_logging()
    logger = logging.getLogger("phl")
    parser = _build_parser()
    ns = parser.parse_args(argv)

    try:
        return run_lookup(country=ns.country, limit=ns.limit, cache_file=ns.cache_file)
    except HolidayLookupError as exc:
        logger.error("%s", exc)
        logger.debug("Failure kind: %s", exc.kind.value)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
