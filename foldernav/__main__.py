# -----------------------------------------------------------------------------
# Simulated folder navigation with back/forward history.
#
# Description:
#   Keeps one current folder with a set of named entries and two history
#   stacks. Leaving a folder snapshots its entries; going back or forward
#   restores the snapshot taken when that folder was left. Nothing touches
#   the real filesystem.
#
# Usage:
#   foldernav [--root NAME] [--entries NAME ...] [--script FILE] [options]
#
# Dependencies:
#   - Python 3.9+
#   - tqdm
#
# -----------------------------------------------------------------------------

import logging
import sys
from foldernav.utils.argparse_setup import get_arg_parser
from foldernav.utils.logging import configure_logging
from foldernav.cli import main_with_args

def main() -> None:
    """Console script / module entry point."""
    args = get_arg_parser().parse_args()
    configure_logging(log_level=getattr(args, "debug", 2))
    try:
        main_with_args(args)
    except Exception as e:
        logging.getLogger("foldernav").error("Fatal: %s", e)
        # No traceback shown unless debug enabled
        if getattr(args, "debug", 0) >= 4:
            raise
        sys.exit(1)

if __name__ == "__main__":
    main()
