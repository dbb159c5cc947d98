from __future__ import annotations
from typing import Any, Optional, Tuple

from foldernav import constants

_current_defaults: Defaults | None = None


def set_current_defaults(defaults: "Defaults") -> None:
    global _current_defaults
    _current_defaults = defaults


def get_current_defaults() -> "Defaults":
    return _current_defaults if _current_defaults is not None else Defaults()


class Defaults:
    """
    Holds CLI overrides and the construction-time defaults for a session.
    Resolution order for each property:
    CLI args override > initial value passed at construction.
    """

    def __init__(
        self,
        root_name: str = constants.ROOT_FOLDER_NAME,
        root_entries: Optional[Tuple[str, ...]] = None,
        max_name_length: int = constants.MAX_NAME_LENGTH,
        history_limit: Optional[int] = constants.HISTORY_LIMIT,
        args: Any | None = None,
        quiet: bool | None = None,
    ):
        self.args = args

        # Base values
        self._root_name: str = root_name
        self._root_entries: Tuple[str, ...] = (
            tuple(root_entries) if root_entries is not None else constants.ROOT_ENTRIES
        )
        self._max_name_length: int = max_name_length
        self._history_limit: Optional[int] = history_limit

        # CLI-sourced overrides (stored separately so properties can resolve precedence)
        self.args_root_name = getattr(args, "root", None) if args else None
        args_entries = getattr(args, "entries", None) if args else None
        self.args_root_entries = tuple(args_entries) if args_entries is not None else None
        self.args_max_name_length = getattr(args, "max_name_length", None) if args else None
        self.args_history_limit = getattr(args, "history_limit", None) if args else None
        self.args_quiet = getattr(args, "quiet", None) if args else None

        self.quiet: bool = (
            quiet
            if quiet is not None
            else bool(self.args_quiet) if self.args_quiet is not None else False
        )

    @property
    def root_name(self) -> str:
        if self.args_root_name is not None:
            return self.args_root_name
        return self._root_name

    @property
    def root_entries(self) -> Tuple[str, ...]:
        if self.args_root_entries is not None:
            return self.args_root_entries
        return self._root_entries

    @property
    def max_name_length(self) -> int:
        if self.args_max_name_length is not None:
            return self.args_max_name_length
        return self._max_name_length

    @property
    def history_limit(self) -> Optional[int]:
        if self.args_history_limit is not None:
            return self.args_history_limit
        return self._history_limit

    def __repr__(self) -> str:
        return (
            f"Defaults(root_name={self.root_name!r}, root_entries={self.root_entries!r}, "
            f"max_name_length={self.max_name_length}, history_limit={self.history_limit}, "
            f"quiet={self.quiet})"
        )
