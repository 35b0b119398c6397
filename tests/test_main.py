import unittest
from unittest.mock import patch

from phl.__main__ import main
from phl.errors import FileAccessError, HolidayClientError, ErrorKind, InvalidCountryCodeError


class MainDispatchTests(unittest.TestCase):
    def test_success_returns_zero(self) -> None:
        with patch("phl.__main__.run_lookup", return_value=0) as run:
            self.assertEqual(main(["de", "--limit", "3"]), 0)
        run.assert_called_once_with(country="de", limit=3, cache_file=None)

    def test_invalid_country_exits_one_with_valid_list(self) -> None:
        with (
            patch(
                "phl.__main__.run_lookup",
                side_effect=InvalidCountryCodeError("ZZ", ["US", "DE"]),
            ),
            self.assertLogs("phl", level="ERROR") as logs,
        ):
            self.assertEqual(main(["zz"]), 1)
        self.assertIn("'ZZ' is not a valid country code", logs.output[0])
        self.assertIn("US, DE", logs.output[0])

    def test_client_and_file_errors_exit_one(self) -> None:
        errors = [
            HolidayClientError("Request timed out: Please try again later.", kind=ErrorKind.TIMEOUT),
            FileAccessError("holidays_cache.json", PermissionError(13, "denied")),
        ]
        for exc in errors:
            with (
                patch("phl.__main__.run_lookup", side_effect=exc),
                self.assertLogs("phl", level="ERROR") as logs,
            ):
                self.assertEqual(main(["US", "--cache-file", "/tmp/c.json"]), 1)
            self.assertIn(str(exc), logs.output[0])

    def test_missing_argument_is_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx, patch("sys.stderr"):
            main([])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
