# ——— Standard library ———
import logging
import sys

# ——— Local ———
from foldernav.history.Navigator import Navigator
from foldernav.menu import MenuSession
from foldernav.script import load_script, run_script
from foldernav.utils.Defaults import Defaults, set_current_defaults

logger = logging.getLogger("foldernav.main")


def build_navigator(defaults: Defaults) -> Navigator:
    navigator = Navigator(
        folder=defaults.root_name,
        entries=defaults.root_entries,
        history_limit=defaults.history_limit,
    )
    logger.debug("Starting in %r", navigator)
    return navigator


def main_with_args(args, stdin=None, stdout=None) -> None:

    defaults: Defaults = Defaults(args=args)
    set_current_defaults(defaults)
    navigator = build_navigator(defaults)
    out = stdout if stdout is not None else sys.stdout

    # Replay a script if requested
    if args.script:
        steps = load_script(args.script)
        for message in run_script(navigator, steps, quiet=defaults.quiet):
            out.write(message + "\n")
        logger.info("Finished in folder '%s'", navigator.current_folder)
        return

    session = MenuSession(
        navigator, stdin=stdin, stdout=out, max_name_length=defaults.max_name_length
    )
    session.run()
