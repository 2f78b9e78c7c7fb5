import asyncio
import inspect
import logging
import os
import sys
from typing import Any, Callable, List, Optional

from litetask.console import print_columns
from litetask.errors import get_reporter, handle_error
from litetask.options import Options, get_cli_options, parse_cli
from litetask.registry import TaskRegistry, resolve_task_name
from litetask.timing import time_task

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TaskRunner:
    """
    Registry of named tasks plus the logic to pick one and run it

    A runner is also its own subtask factory: calling it returns a new,
    independent runner. Task functions receive ``(options, runner)`` so they
    can build and run nested tasks.

    Awaiting the runner starts the default run once (task named by the first
    positional argument, else "default") unless ``options.run`` is False.
    Everything registered before the first await is visible to that run.

    Example:
        tasks = create_tasks()

        @tasks.task()
        async def build(options, subtasks):
            ...

        tasks.add("test", run_tests)

        if __name__ == "__main__":
            tasks.main()
    """

    def __init__(self, options: Optional[Options] = None):
        """
        Args:
            options: Options for this runner (None = process-wide CLI options)
        """
        self._options = options
        self._registry = TaskRegistry()
        self._started: Optional[asyncio.Future] = None

    @property
    def options(self) -> Options:
        if self._options is None:
            return get_cli_options()
        return self._options

    @property
    def cli(self) -> Options:
        """Options parsed from the process command line"""
        return get_cli_options()

    def __call__(self, options: Optional[Options] = None) -> "TaskRunner":
        """Create an independent runner (subtask scope)"""
        logger.debug("Creating subtask runner")
        return TaskRunner(options)

    def add(self, name: str, func: Callable) -> "TaskRunner":
        """
        Register a task

        Args:
            name: Task name, a later registration with the same name wins
            func: Callable taking (options, subtasks), sync or async

        Returns:
            This runner, so registrations can be chained

        Raises:
            InvalidArgument: name is not a non-empty string or func is not callable
        """
        self._registry.register(name, func)
        logger.debug(f"Registered task '{name}'")
        return self

    def task(self, name: Optional[str] = None):
        """Decorator form of add(); the task name defaults to the function name"""

        def decorator(func):
            self.add(name or func.__name__, func)
            return func

        return decorator

    def names(self) -> List[str]:
        return self._registry.names()

    async def run(self, name: Optional[str] = None) -> Any:
        """
        Run a single task and return its result

        The task is the explicit name, else the first positional argument
        (which is consumed), else "default". Unknown names print the list of
        registered tasks and return None. Errors raised by the task propagate.
        """
        if not self._registry:
            return None

        options = self.options
        name, options.args = resolve_task_name(name, options.args)

        func = self._registry.get(name)
        if func is None:
            logger.debug(f"Task '{name}' not found")
            print_columns(self._registry.names())
            return None

        done = time_task(name, options)

        result = func(options, self)
        if inspect.isawaitable(result):
            result = await result

        return done(result)

    async def _run_default(self):
        if self.options.run is False:
            return None
        return await self.run()

    def start(self) -> asyncio.Future:
        """Start the default run (once) on the running event loop"""
        if self._started is None:
            self._started = asyncio.ensure_future(self._run_default())
        return self._started

    def __await__(self):
        return self.start().__await__()

    async def _main(self):
        get_reporter().install_loop(asyncio.get_running_loop())
        return await self

    def main(self, argv: Optional[List[str]] = None):
        """
        Script entry point: run the selected task and exit

        Exits with 0 on success, otherwise with the failing error's integer
        ``code`` attribute, or 1.

        Args:
            argv: Arguments to parse instead of this runner's options
        """
        if argv is not None:
            self._options = parse_cli(argv)

        logging.basicConfig(
            level=os.environ.get("LITETASK_LOG_LEVEL", "WARNING").upper(),
            format=LOG_FORMAT,
        )

        reporter = get_reporter()
        reporter.install()
        reporter.exit_code = 0
        self._started = None
        try:
            asyncio.run(self._main())
        except Exception as e:
            handle_error(e)
        finally:
            reporter.teardown()

        sys.exit(reporter.exit_code)

    def __repr__(self):
        return f"<TaskRunner tasks={self.names()}>"


def create_tasks(options: Optional[Options] = None) -> TaskRunner:
    """Create a task runner (None = use options parsed from the command line)"""
    return TaskRunner(options)


tasks = create_tasks()
