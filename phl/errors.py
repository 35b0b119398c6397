from __future__ import annotations

import errno
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_COUNTRY = "invalid_country"
    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    FILE_OTHER = "file_other"
    MALFORMED_RESOURCE = "malformed_resource"
    HTTP_BAD_REQUEST = "http_400"
    HTTP_NOT_FOUND = "http_404"
    HTTP_SERVER_ERROR = "http_500"
    HTTP_UNAVAILABLE = "http_503"
    HTTP_OTHER = "http_other"
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    TRANSPORT_OTHER = "transport_other"
    INVALID_RESPONSE = "invalid_response"


class HolidayLookupError(RuntimeError):
    """Base error; carries the kind used by the CLI dispatcher."""

    kind: ErrorKind = ErrorKind.FILE_OTHER

    def __init__(self, message: str, *, kind: ErrorKind | None = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class InvalidCountryCodeError(HolidayLookupError):
    kind = ErrorKind.INVALID_COUNTRY

    def __init__(self, country_code: str, valid_codes: list[str]):
        super().__init__(
            f"'{country_code}' is not a valid country code. "
            f"Valid country codes are: {', '.join(valid_codes)}"
        )
        self.country_code = country_code
        self.valid_codes = valid_codes


class FileAccessError(HolidayLookupError):
    """Reading or writing a local file failed."""

    def __init__(self, path: str, exc: OSError):
        kind = _file_error_kind(exc)
        if kind is ErrorKind.FILE_NOT_FOUND:
            message = f"The file '{path}' was not found."
        elif kind is ErrorKind.PERMISSION_DENIED:
            message = f"Permission denied while accessing '{path}'."
        else:
            message = f"An unexpected error occurred with '{path}': {exc}"
        super().__init__(message, kind=kind)
        self.path = path


class MalformedResourceError(HolidayLookupError):
    kind = ErrorKind.MALFORMED_RESOURCE


class HolidayClientError(HolidayLookupError):
    """Remote fetch failed (transport or payload)."""

    kind = ErrorKind.TRANSPORT_OTHER


class HolidayHTTPError(HolidayClientError):
    def __init__(self, status_code: int):
        kind, message = _http_error(status_code)
        super().__init__(message, kind=kind)
        self.status_code = status_code


def _file_error_kind(exc: OSError) -> ErrorKind:
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return ErrorKind.FILE_NOT_FOUND
    if isinstance(exc, PermissionError) or exc.errno in {errno.EACCES, errno.EPERM}:
        return ErrorKind.PERMISSION_DENIED
    return ErrorKind.FILE_OTHER


_HTTP_MESSAGES: dict[int, tuple[ErrorKind, str]] = {
    400: (ErrorKind.HTTP_BAD_REQUEST, "Bad Request."),
    404: (ErrorKind.HTTP_NOT_FOUND, "Not Found."),
    500: (ErrorKind.HTTP_SERVER_ERROR, "Internal Server Error."),
    503: (ErrorKind.HTTP_UNAVAILABLE, "Service Unavailable."),
}


def _http_error(status_code: int) -> tuple[ErrorKind, str]:
    if status_code in _HTTP_MESSAGES:
        return _HTTP_MESSAGES[status_code]
    return ErrorKind.HTTP_OTHER, f"Unexpected HTTP status: {status_code}"


__all__ = [
    "ErrorKind",
    "HolidayLookupError",
    "InvalidCountryCodeError",
    "FileAccessError",
    "MalformedResourceError",
    "HolidayClientError",
    "HolidayHTTPError",
]
