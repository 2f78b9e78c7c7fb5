import logging
import sys
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An unknown error has occurred."


class InvalidArgument(TypeError):
    """Raised when a task is registered with a bad name or a non-callable"""


def exit_code_for(error) -> int:
    """Exit status for an error: its integer ``code`` attribute, otherwise 1"""
    code = getattr(error, "code", None)
    if isinstance(code, int) and not isinstance(code, bool):
        return code
    return 1


def log_error(error):
    """Default sink: write the error and its traceback to stderr via logging"""
    if isinstance(error, BaseException):
        logger.error(f"{type(error).__name__}: {error}", exc_info=(type(error), error, error.__traceback__))
    else:
        logger.error(str(error))


class ErrorReporter:
    """
    Process-wide handler for failures nobody caught

    Records the exit status the process should end with and hands the error
    to a sink. Hooks into sys.excepthook, threading.excepthook and the asyncio
    loop exception handler while installed.

    Example:
        reporter = ErrorReporter(sink=captured.append)
        reporter.install()
        ...
        reporter.teardown()
    """

    def __init__(self, sink: Optional[Callable] = None):
        self.sink = sink or log_error
        self.exit_code = 0
        self._installed = False
        self._previous_excepthook = None
        self._previous_threading_excepthook = None
        self._loops = []

    def handle_error(self, error=None):
        """
        Record a failure

        Args:
            error: Exception (or any error-like value). A generic message is
                used when omitted.
        """
        if error is None:
            error = DEFAULT_ERROR_MESSAGE
        self.exit_code = exit_code_for(error)
        self.sink(error)

    def _excepthook(self, exc_type, exc, tb):
        self.handle_error(exc if exc is not None else exc_type())

    def _threading_excepthook(self, args):
        if args.exc_type is SystemExit:
            return
        self.handle_error(args.exc_value)

    def _loop_exception_handler(self, loop, context):
        error = context.get("exception")
        if error is None:
            error = RuntimeError(context.get("message", DEFAULT_ERROR_MESSAGE))
        self.handle_error(error)

    def install(self):
        """Become the handler for uncaught exceptions (idempotent)"""
        if self._installed:
            return
        self._previous_excepthook = sys.excepthook
        self._previous_threading_excepthook = threading.excepthook
        sys.excepthook = self._excepthook
        threading.excepthook = self._threading_excepthook
        self._installed = True

    def install_loop(self, loop):
        """Handle exceptions the asyncio loop could not deliver (never-awaited tasks)"""
        if any(entry[0] is loop for entry in self._loops):
            return
        self._loops.append((loop, loop.get_exception_handler()))
        loop.set_exception_handler(self._loop_exception_handler)

    def teardown(self):
        """Restore the hooks that were active before install()"""
        if self._installed:
            sys.excepthook = self._previous_excepthook
            threading.excepthook = self._previous_threading_excepthook
            self._installed = False

        for loop, previous in self._loops:
            if not loop.is_closed():
                loop.set_exception_handler(previous)
        self._loops = []

    @property
    def installed(self) -> bool:
        return self._installed


reporter = ErrorReporter()


def get_reporter() -> ErrorReporter:
    return reporter


def set_reporter(new_reporter: ErrorReporter) -> ErrorReporter:
    """Swap the process-wide reporter, returning the previous one"""
    global reporter
    previous = reporter
    reporter = new_reporter
    return previous


def handle_error(error=None):
    """Report an unrecovered failure to the process-wide reporter"""
    reporter.handle_error(error)
