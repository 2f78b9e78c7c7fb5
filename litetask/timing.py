import time
from datetime import datetime
from typing import Any, Callable

from litetask.console import format_duration, highlight_duration, highlight_name, log_time
from litetask.options import Options


def _identity(value):
    return value


def time_task(name: str, options: Options) -> Callable[[Any], Any]:
    """
    Start timing a task

    Logs "Starting '<name>' ..." now and returns a callable that logs
    "Finished '<name>' (<duration>)" and passes its argument through.
    In quiet mode nothing is logged and the identity function is returned.
    """
    if options.quiet:
        return _identity

    start = time.perf_counter()
    log_time(datetime.now(), f"Starting '{highlight_name(name)}' ...")

    def done(value):
        elapsed = (time.perf_counter() - start) * 1000
        log_time(datetime.now(), f"Finished '{highlight_name(name)}' ({highlight_duration(format_duration(elapsed))})")
        return value

    return done
