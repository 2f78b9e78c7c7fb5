import argparse
import importlib
import logging
import os
import sys

from litetask.errors import get_reporter, handle_error
from litetask.options import parse_cli, set_cli_options
from litetask.runner import tasks

logger = logging.getLogger(__name__)


def load_tasks_module(app: str):
    """Import a tasks file ("tasks.py") or module ("build.tasks") from the cwd"""
    sys.path.append(os.getcwd())
    module_name = app[:-3] if app.endswith(".py") else app
    module_name = module_name.replace(os.sep, ".")
    logger.debug(f"Loading tasks from {module_name}")
    return importlib.import_module(module_name)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="litetask",
        usage="litetask [--app FILE] [task] [--quiet] [--no-run] [flags...]",
        description="Run a named task from a tasks file",
        allow_abbrev=False,
    )
    parser.add_argument("--app", default="tasks.py", help="File or module with tasks (default: tasks.py)")

    args, rest = parser.parse_known_args(sys.argv[1:] if argv is None else argv)

    try:
        load_tasks_module(args.app)
    except ImportError as e:
        handle_error(e)
        sys.exit(get_reporter().exit_code)

    set_cli_options(parse_cli(rest))
    tasks.main()


if __name__ == "__main__":
    main()
