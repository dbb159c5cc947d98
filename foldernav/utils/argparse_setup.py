import argparse
from foldernav.constants import MAX_NAME_LENGTH, ROOT_ENTRIES, ROOT_FOLDER_NAME, VERSION


# Argument parsing setup
def positive_int(s: str) -> int:
    """
    argparse “type” function: returns the value if it is a whole number
    of at least 1, otherwise raises ArgumentTypeError.
    """
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number {s!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"{s!r} must be at least 1")
    return value


def folder_name(s: str) -> str:
    """argparse “type” function rejecting blank names."""
    if not s.strip():
        raise argparse.ArgumentTypeError("folder and entry names must not be blank")
    return s


def get_arg_parser() -> argparse.ArgumentParser:
    """
    Create and return the argument parser for the folder navigator.
    """
    parser = argparse.ArgumentParser(
        description="Navigate a simulated folder tree with back/forward history."
    )
    parser.add_argument(
        "--root",
        type=folder_name,
        help=f"Name of the starting folder (default: {ROOT_FOLDER_NAME})",
    )
    parser.add_argument(
        "--entries",
        "-e",
        metavar="NAME",
        nargs="*",
        type=folder_name,
        help=f"Entries of the starting folder (default: {' '.join(ROOT_ENTRIES)})",
    )
    parser.add_argument(
        "--history-limit",
        "--hl",
        dest="history_limit",
        type=positive_int,
        help="Keep at most N frames in each history stack (default: unlimited)",
    )
    parser.add_argument(
        "--max-name-length",
        dest="max_name_length",
        type=positive_int,
        help=f"Longest accepted name at the prompt (default: {MAX_NAME_LENGTH})",
    )
    parser.add_argument(
        "--script",
        "-s",
        metavar="FILE",
        help="Replay commands from FILE instead of showing the menu",
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Hide the replay progress bar"
    )
    parser.add_argument(
        "--debug",
        "-d",
        type=int,
        default=2,
        choices=range(1, 6),
        metavar="LEVEL",
        help="Log verbosity 1-5 (1 errors only, 4 debug, 5 trace)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser
