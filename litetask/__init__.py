__version__ = "0.1.0"

from litetask.options import Options, parse_cli, get_cli_options, set_cli_options
from litetask.registry import TaskRegistry, resolve_task_name
from litetask.runner import TaskRunner, create_tasks, tasks
from litetask.decorators import task
from litetask.console import format_duration
from litetask.errors import (
    InvalidArgument,
    ErrorReporter,
    handle_error,
    get_reporter,
    set_reporter,
)

__all__ = [
    "Options",
    "parse_cli",
    "get_cli_options",
    "set_cli_options",
    "TaskRegistry",
    "resolve_task_name",
    "TaskRunner",
    "create_tasks",
    "tasks",
    "task",
    "format_duration",
    "InvalidArgument",
    "ErrorReporter",
    "handle_error",
    "get_reporter",
    "set_reporter",
]
