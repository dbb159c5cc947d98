from __future__ import annotations

import logging
import sys
from enum import IntEnum
from typing import List, Optional, TextIO

from foldernav import constants
from foldernav.history.EntrySet import EntrySet
from foldernav.history.Navigator import Navigator
from foldernav.history.outcome import Outcome

logger = logging.getLogger(__name__)


class Command(IntEnum):
    NAVIGATE = 1
    BACK = 2
    FORWARD = 3
    ADD = 4
    DELETE = 5
    LIST = 6
    EXIT = 7

    @property
    def needs_name(self) -> bool:
        return self in (Command.NAVIGATE, Command.ADD, Command.DELETE)


MENU_TEXT = (
    "Menu:\n"
    "1. Navigate to a new folder\n"
    "2. Go Back\n"
    "3. Go Forward\n"
    "4. Add a file/folder\n"
    "5. Delete a file/folder\n"
    "6. Show folder contents\n"
    "7. Exit"
)

NAME_PROMPTS = {
    Command.NAVIGATE: "Enter folder name to navigate: ",
    Command.ADD: "Enter file/folder name to add: ",
    Command.DELETE: "Enter file/folder name to delete: ",
}


def parse_choice(text: str) -> Command:
    """
    Turn a menu reply into a Command. Raises ValueError with the message
    to show the user when the reply is not a number from 1 to 7.
    """
    try:
        number = int(text.strip())
    except ValueError:
        raise ValueError("Invalid input. Please enter a number 1-7.") from None
    try:
        return Command(number)
    except ValueError:
        raise ValueError("Invalid choice. Please enter a number from 1 to 7.") from None


def describe(command: Command, outcome: Outcome, folder: str) -> str:
    """Status line for a finished command; folder is the current folder afterwards."""
    name = outcome.subject
    if command is Command.NAVIGATE:
        if outcome.ok:
            return f"Navigated to folder '{outcome.value}'."
        return f"Folder '{name}' does not exist in current folder."
    if command is Command.BACK:
        if outcome.ok:
            return f"Moved back to '{outcome.value}'."
        return "No folder to go back to."
    if command is Command.FORWARD:
        if outcome.ok:
            return f"Moved forward to '{outcome.value}'."
        return "No folder to go forward to."
    if command is Command.ADD:
        if outcome.ok:
            return f"'{name}' added to '{folder}'."
        return f"'{name}' already exists."
    if command is Command.DELETE:
        if outcome.ok:
            return f"'{name}' deleted from '{folder}'."
        return f"'{name}' not found in '{folder}'."
    raise ValueError(f"{command.name} has no outcome to describe")


def history_hint(navigator: Navigator) -> str:
    """Where back and forward would lead, '-' for an empty direction."""
    back = navigator.back_stack.peek() if navigator.can_go_back() else "-"
    forward = navigator.forward_stack.peek() if navigator.can_go_forward() else "-"
    return f"Back: {back} | Forward: {forward}"


def render_listing(navigator: Navigator) -> str:
    lines = [f"Contents of '{navigator.current_folder}':"]
    names = [f"- {name}" for name in navigator.list_entries()]
    lines.extend(names or [f" {EntrySet.EMPTY_MARKER} "])
    return "\n".join(lines)


def execute(navigator: Navigator, command: Command, name: Optional[str] = None) -> str:
    """Run one command against the navigator and return the text to show."""
    if command is Command.LIST:
        return render_listing(navigator)
    if command is Command.EXIT:
        return "Exiting program."

    if command is Command.NAVIGATE:
        outcome = navigator.navigate(name)
    elif command is Command.BACK:
        outcome = navigator.go_back()
    elif command is Command.FORWARD:
        outcome = navigator.go_forward()
    elif command is Command.ADD:
        outcome = navigator.add_entry(name)
    else:
        outcome = navigator.delete_entry(name)

    if not outcome.ok:
        logger.debug("%s rejected: %s (%s)", command.name, outcome.failure.value, outcome.subject)
    return describe(command, outcome, navigator.current_folder)


class MenuSession:
    """
    Interactive numbered menu around a Navigator. Reads replies from stdin
    and writes prompts and results to stdout until Exit or end of input.
    """

    def __init__(
        self,
        navigator: Navigator,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        max_name_length: int = constants.MAX_NAME_LENGTH,
    ) -> None:
        self.navigator = navigator
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.max_name_length = max_name_length
        self.transcript: List[str] = []

    def _write(self, text: str, end: str = "\n") -> None:
        self.stdout.write(text + end)
        self.stdout.flush()

    def _read(self, prompt: str) -> Optional[str]:
        self._write(prompt, end="")
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _read_name(self, command: Command) -> Optional[str]:
        """Prompt for a name; returns None (after telling the user) if it is unusable."""
        name = self._read(NAME_PROMPTS[command])
        if name is None:
            return None
        if not name.strip():
            self._report("Name must not be empty.")
            return None
        if len(name) > self.max_name_length:
            self._report(f"Name is longer than {self.max_name_length} characters.")
            return None
        return name

    def _report(self, message: str) -> None:
        self.transcript.append(message)
        self._write(message)

    def step(self) -> bool:
        """Show the menu and handle one reply. Returns False once the session should end."""
        self._write(f"\nCurrent Folder: {self.navigator.current_folder}")
        self._write(history_hint(self.navigator))
        self._write(MENU_TEXT)
        reply = self._read("Enter your choice: ")
        if reply is None:
            logger.debug("End of input; leaving menu")
            return False

        try:
            command = parse_choice(reply)
        except ValueError as e:
            self._report(str(e))
            return True

        name = None
        if command.needs_name:
            name = self._read_name(command)
            if name is None:
                return True

        self._report(execute(self.navigator, command, name))
        return command is not Command.EXIT

    def run(self) -> None:
        while self.step():
            pass
