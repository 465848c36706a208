"""Errors reported by the exchange API."""

from __future__ import annotations


class APIError(Exception):
    """An error returned by the API with a 4xx or 5xx status."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"<APIError> code={self.code}, msg={self.message}"


def is_api_error(error: BaseException | None) -> bool:
    """Tell whether ``error`` is, or was caused by, an :class:`APIError`."""
    seen: set[int] = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, APIError):
            return True
        seen.add(id(error))
        error = error.__cause__ or error.__context__
    return False