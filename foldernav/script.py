"""
Replay of navigation commands stored in a text file.

One command per line; blank lines and lines starting with '#' are skipped:

    navigate Documents
    add notes.txt
    back
    forward
    delete notes.txt
    list
    exit

Everything after the keyword is the name, so names may contain spaces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from foldernav import constants
from foldernav.history.Navigator import Navigator
from foldernav.menu import Command, execute
from foldernav.utils.progress import progress

logger = logging.getLogger(__name__)

KEYWORDS = {
    "navigate": Command.NAVIGATE,
    "cd": Command.NAVIGATE,
    "back": Command.BACK,
    "forward": Command.FORWARD,
    "add": Command.ADD,
    "delete": Command.DELETE,
    "rm": Command.DELETE,
    "list": Command.LIST,
    "ls": Command.LIST,
    "exit": Command.EXIT,
}


class ScriptError(ValueError):
    def __init__(self, line_number: int, message: str):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


@dataclass
class ScriptStep:
    line_number: int
    command: Command
    name: Optional[str] = None


def parse_line(line_number: int, line: str) -> Optional[ScriptStep]:
    text = line.strip()
    if not text or text.startswith(constants.SCRIPT_COMMENT):
        return None

    keyword, _, rest = text.partition(" ")
    command = KEYWORDS.get(keyword.lower())
    if command is None:
        raise ScriptError(line_number, f"unknown command {keyword!r}")

    name = rest.strip() or None
    if command.needs_name and name is None:
        raise ScriptError(line_number, f"{keyword} needs a name")
    if not command.needs_name and name is not None:
        raise ScriptError(line_number, f"{keyword} takes no name")
    return ScriptStep(line_number, command, name)


def parse_script(lines: Iterable[str]) -> List[ScriptStep]:
    """Parse every line up front so a bad script fails before anything runs."""
    steps = []
    for line_number, line in enumerate(lines, start=1):
        step = parse_line(line_number, line)
        if step is not None:
            steps.append(step)
    return steps


def load_script(path: str) -> List[ScriptStep]:
    with open(path, "r", encoding="utf-8") as f:
        steps = parse_script(f)
    logger.info("Loaded %d step(s) from %s", len(steps), path)
    return steps


def run_script(
    navigator: Navigator, steps: List[ScriptStep], quiet: Optional[bool] = None
) -> List[str]:
    """
    Execute steps in order and return the message each produced. An exit
    step ends the replay early.
    """
    messages: List[str] = []
    with progress(steps, total=len(steps), desc="Replaying", unit="cmd", quiet=quiet) as pbar:
        for step in pbar:
            message = execute(navigator, step.command, step.name)
            logger.debug("line %d: %s", step.line_number, message)
            messages.append(message)
            if step.command is Command.EXIT:
                break
    return messages
