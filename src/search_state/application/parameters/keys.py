"""Application parameters – well-known parameter keys."""
from __future__ import annotations

from typing import Final


class Param:
    """Parameter keys the search state gives meaning to.

    Plain ``str`` constants, so ``params[Param.Q]`` and ``params["q"]`` are
    the same lookup.
    """

    Q: Final = "q"
    F: Final = "f"
    PAGE: Final = "page"
    PER_PAGE: Final = "per_page"
    SORT: Final = "sort"
    COUNTER: Final = "counter"
    CONTROLLER: Final = "controller"
    ACTION: Final = "action"
    ID: Final = "id"


# Search-context keys that never survive into a derived state.
RESET_KEYS: Final = (Param.PAGE, Param.COUNTER)


__all__ = ["Param", "RESET_KEYS"]
