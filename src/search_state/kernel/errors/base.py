"""Root error class for the search-state error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class SearchStateError(Exception):
    """Root of the error hierarchy.

    ``code`` is a stable slug for API responses and log events; ``detail``
    holds the offending field or value.  When raised ``from`` another
    exception, that exception is reported as ``cause``.
    """

    default_code: str = "search_state_error"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for log events and error responses."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["SearchStateError"]
