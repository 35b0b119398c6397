from __future__ import annotations

import os

import pytest

from phl.country_codes import (
    BUNDLED_COUNTRY_CODES,
    load_country_codes,
    validate_country_code,
)
from phl.errors import ErrorKind, FileAccessError, InvalidCountryCodeError, MalformedResourceError


def test_load_trims_and_uppercases(tmp_path):
    path = tmp_path / "codes.txt"
    path.write_text("# header\n us \nde\n\n  GB\n", encoding="utf-8")
    assert load_country_codes(str(path)) == ["US", "DE", "GB"]


def test_bundled_list_contains_common_countries():
    codes = load_country_codes(BUNDLED_COUNTRY_CODES)
    for code in ("US", "DE", "GB", "JP", "TR"):
        assert code in codes
    assert "ZZ" not in codes


def test_missing_file_is_not_found(tmp_path):
    with pytest.raises(FileAccessError) as exc_info:
        load_country_codes(os.path.join(tmp_path, "missing.txt"))
    assert exc_info.value.kind is ErrorKind.FILE_NOT_FOUND
    assert "was not found" in str(exc_info.value)


def test_empty_file_is_malformed(tmp_path):
    path = tmp_path / "codes.txt"
    path.write_text("\n# nothing\n", encoding="utf-8")
    with pytest.raises(MalformedResourceError):
        load_country_codes(str(path))


def test_validate_is_case_insensitive():
    assert validate_country_code("de", ["US", "DE"]) == "DE"


def test_validate_rejects_unknown_code():
    with pytest.raises(InvalidCountryCodeError) as exc_info:
        validate_country_code("zz", ["US", "DE"])
    assert exc_info.value.country_code == "ZZ"
    assert "US, DE" in str(exc_info.value)
