from __future__ import annotations

import pytest

from foldernav.history.Navigator import Navigator
from foldernav.menu import Command
from foldernav.script import ScriptError, ScriptStep, load_script, parse_script, run_script


SCENARIO = """\
# Walk into Documents and back out
navigate Documents
add notes.txt

back
forward
list
navigate root
"""


@pytest.fixture
def nav():
    return Navigator("root", ["Documents", "Pictures", "file1.txt"])


def test_parse_script_skips_comments_and_blanks():
    steps = parse_script(SCENARIO.splitlines())

    assert [s.command for s in steps] == [
        Command.NAVIGATE,
        Command.ADD,
        Command.BACK,
        Command.FORWARD,
        Command.LIST,
        Command.NAVIGATE,
    ]
    assert steps[0] == ScriptStep(2, Command.NAVIGATE, "Documents")
    assert steps[2].line_number == 5


def test_parse_script_keeps_spaces_in_names():
    steps = parse_script(["add  My Photos "])

    assert steps == [ScriptStep(1, Command.ADD, "My Photos")]


def test_parse_script_accepts_aliases():
    steps = parse_script(["cd a", "rm b", "LS"])

    assert [s.command for s in steps] == [Command.NAVIGATE, Command.DELETE, Command.LIST]


@pytest.mark.parametrize(
    "line, message",
    [
        ("jump Documents", "unknown command 'jump'"),
        ("navigate", "navigate needs a name"),
        ("back now", "back takes no name"),
    ],
)
def test_parse_script_rejects_bad_lines(line, message):
    with pytest.raises(ScriptError) as excinfo:
        parse_script(["list", line])

    assert excinfo.value.line_number == 2
    assert str(excinfo.value) == f"line 2: {message}"


def test_run_script_replays_scenario(nav):
    messages = run_script(nav, parse_script(SCENARIO.splitlines()), quiet=True)

    assert messages == [
        "Navigated to folder 'Documents'.",
        "'notes.txt' added to 'Documents'.",
        "Moved back to 'root'.",
        "Moved forward to 'Documents'.",
        "Contents of 'Documents':\n- notes.txt",
        "Folder 'root' does not exist in current folder.",
    ]
    assert nav.current_folder == "Documents"


def test_run_script_stops_at_exit(nav):
    steps = parse_script(["add a", "exit", "add b"])

    messages = run_script(nav, steps, quiet=True)

    assert messages == ["'a' added to 'root'.", "Exiting program."]
    assert "b" not in list(nav.list_entries())


def test_run_script_with_progress_bar(nav):
    messages = run_script(nav, parse_script(["add a", "list"]), quiet=False)

    assert messages[-1] == "Contents of 'root':\n- Documents\n- Pictures\n- file1.txt\n- a"


def test_load_script_reads_file(tmp_path):
    path = tmp_path / "walk.txt"
    path.write_text(SCENARIO, encoding="utf-8")

    steps = load_script(str(path))

    assert len(steps) == 6
