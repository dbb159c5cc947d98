from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Optional

from foldernav.history.EntrySet import EntrySet

logger: logging.Logger = logging.getLogger(__name__)


@dataclass
class HistoryFrame:
    """A folder name paired with its contents as they were when it was left."""

    folder_name: str
    snapshot: EntrySet


class HistoryStack:
    def __init__(self, max_size: Optional[int] = None):
        """
        Initialize a new HistoryStack.

        Args:
            max_size (int, optional): The maximum number of frames kept. When
                                      full, pushing drops the oldest frame.
                                      If None, the stack size is unlimited.
        """
        self.max_size = max_size
        self.stack: deque[HistoryFrame] = deque(maxlen=max_size)

    def push(self, folder_name: str, contents: EntrySet) -> None:
        """
        Push a copy of a folder's state onto the stack.

        Args:
            folder_name (str): Name of the folder being left.
            contents (EntrySet): Its live contents. Only a snapshot is stored,
                                 so the caller keeps sole use of the original.
        """
        if self.is_full():
            logger.debug(
                "History full (%d frames); dropping oldest '%s'",
                self.max_size,
                self.stack[0].folder_name,
            )
        self.stack.append(HistoryFrame(folder_name, contents.snapshot()))

    def pop(self) -> Optional[HistoryFrame]:
        """
        Pop the most recently pushed frame.

        Returns:
            HistoryFrame: The frame, now owned only by the caller, or None if
                          the stack is empty.
        """
        if self.stack:
            return self.stack.pop()
        logger.debug("Stack is empty. Cannot pop a frame.")
        return None

    def peek(self) -> Optional[str]:
        """Folder name on top of the stack, without removing it."""
        if self.stack:
            return self.stack[-1].folder_name
        return None

    def clear(self):
        """Drop every frame."""
        self.stack.clear()

    def is_empty(self):
        return len(self.stack) == 0

    def is_full(self):
        if self.max_size is None:
            return False
        return len(self.stack) >= self.max_size

    def __len__(self):
        return len(self.stack)

    def __repr__(self):
        names = [frame.folder_name for frame in self.stack]
        return f"HistoryStack(frames={names}, max_size={self.max_size})"
