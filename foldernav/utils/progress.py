"""
Progress bar wrapper that keeps console tqdm output unchanged but can be
silenced through the shared quiet flag, so callers can treat it as a
drop-in replacement for `tqdm(...)`.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional

from foldernav.utils.Defaults import get_current_defaults

from tqdm import tqdm

logger = logging.getLogger(__name__)


class _NullProgress:
    """
    No-op progress stand-in used when quiet is requested. It maintains the
    surface area expected from tqdm so existing callers keep working.
    """

    def __init__(
        self,
        iterable: Optional[Iterable[Any]] = None,
        total: Optional[int] = None,
        desc: str | None = None,
    ) -> None:
        self.iterable = iterable
        self.total = total
        self.desc = desc or ""

    def __iter__(self) -> Iterator[Any]:
        if self.iterable is None:
            return iter(())
        return iter(self.iterable)

    def __enter__(self) -> "_NullProgress":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        return None

    def update(self, n: int = 1) -> None:
        return None

    def set_description(self, desc: str, refresh: bool = True) -> None:
        self.desc = desc

    def close(self) -> None:
        return None


def progress(
    iterable: Optional[Iterable[Any]] = None,
    *,
    quiet: Optional[bool] = None,
    **tqdm_kwargs: Any,
) -> Any:
    """
    Factory matching `tqdm(iterable, **kwargs)`. Returns a silent stand-in
    when quiet is set, either explicitly or on the current Defaults.
    """
    if quiet is None:
        quiet = get_current_defaults().quiet
    if quiet:
        logger.debug("Progress suppressed: %s", tqdm_kwargs.get("desc", ""))
        return _NullProgress(iterable, tqdm_kwargs.get("total"), tqdm_kwargs.get("desc"))
    return tqdm(iterable, **tqdm_kwargs)
