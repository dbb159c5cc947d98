from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from foldernav import constants
from foldernav.history.EntrySet import EntrySet
from foldernav.history.HistoryStack import HistoryFrame, HistoryStack
from foldernav.history.outcome import FailureKind, Outcome

logger = logging.getLogger(__name__)


class Navigator:
    """
    Current folder plus back/forward history.

    Leaving a folder pushes a copy of its contents; returning to it through
    go_back/go_forward adopts the popped copy as the live contents. Every
    operation checks before it mutates, so a failed call changes nothing.
    """

    def __init__(
        self,
        folder: str = constants.ROOT_FOLDER_NAME,
        entries: Optional[Iterable[str]] = None,
        history_limit: Optional[int] = None,
    ):
        self.current_folder: str = folder
        self.current_contents: EntrySet = EntrySet(entries)
        self.back_stack = HistoryStack(max_size=history_limit)
        self.forward_stack = HistoryStack(max_size=history_limit)

    def navigate(self, target: str) -> Outcome:
        """
        Enter a folder listed in the current contents. Forward history is
        discarded and the new folder starts empty, even if it was visited
        before.
        """
        if target not in self.current_contents:
            logger.debug("navigate: '%s' not in '%s'", target, self.current_folder)
            return Outcome.fail(FailureKind.NOT_FOUND, target)

        self.back_stack.push(self.current_folder, self.current_contents)
        if not self.forward_stack.is_empty():
            logger.debug("navigate: discarding %d forward frame(s)", len(self.forward_stack))
        self.forward_stack.clear()

        self.current_folder = target
        self.current_contents = EntrySet()
        logger.debug("navigate: now in '%s'", target)
        return Outcome.success(target)

    def go_back(self) -> Outcome:
        return self._restore(self.back_stack, self.forward_stack, "back")

    def go_forward(self) -> Outcome:
        return self._restore(self.forward_stack, self.back_stack, "forward")

    def _restore(self, source: HistoryStack, other: HistoryStack, direction: str) -> Outcome:
        if source.is_empty():
            logger.debug("%s: no history", direction)
            return Outcome.fail(FailureKind.NO_HISTORY, self.current_folder)

        other.push(self.current_folder, self.current_contents)
        frame: HistoryFrame = source.pop()
        # The popped frame is no longer reachable from any stack, so its set
        # becomes the live one without another copy.
        self.current_folder = frame.folder_name
        self.current_contents = frame.snapshot
        logger.debug(
            "%s: now in '%s' (%d entries)", direction, self.current_folder, len(self.current_contents)
        )
        return Outcome.success(self.current_folder)

    def add_entry(self, name: str) -> Outcome:
        if not self.current_contents.insert(name):
            return Outcome.fail(FailureKind.ALREADY_EXISTS, name)
        logger.debug("Added '%s' to '%s'", name, self.current_folder)
        return Outcome.success(name)

    def delete_entry(self, name: str) -> Outcome:
        if not self.current_contents.remove(name):
            return Outcome.fail(FailureKind.NOT_FOUND, name)
        logger.debug("Deleted '%s' from '%s'", name, self.current_folder)
        return Outcome.success(name)

    def list_entries(self) -> Iterator[str]:
        return self.current_contents.list()

    def can_go_back(self) -> bool:
        return not self.back_stack.is_empty()

    def can_go_forward(self) -> bool:
        return not self.forward_stack.is_empty()

    def __repr__(self):
        return (
            f"Navigator(folder={self.current_folder!r}, contents={self.current_contents!r}, "
            f"back={len(self.back_stack)}, forward={len(self.forward_stack)})"
        )
