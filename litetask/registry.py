import logging
from typing import Callable, Dict, List, Optional, Tuple

from litetask.errors import InvalidArgument

logger = logging.getLogger(__name__)

DEFAULT_TASK = "default"


class TaskRegistry:
    """Name -> task function mapping owned by a single runner"""

    def __init__(self):
        self._tasks: Dict[str, Callable] = {}

    def register(self, name: str, func: Callable):
        """Register a task function, replacing any task with the same name"""
        if not isinstance(name, str) or not name:
            raise InvalidArgument("Task name must be a string.")
        if not callable(func):
            raise InvalidArgument("Task must be a function.")

        if name in self._tasks:
            logger.debug(f"Task '{name}' replaced")
        self._tasks[name] = func

    def get(self, name: str) -> Optional[Callable]:
        """Get a registered task function"""
        return self._tasks.get(name)

    def names(self) -> List[str]:
        """List registered task names in registration order"""
        return list(self._tasks.keys())

    def __contains__(self, name):
        return name in self._tasks

    def __len__(self):
        return len(self._tasks)

    def __bool__(self):
        return bool(self._tasks)


def resolve_task_name(name: Optional[str], args: List[str]) -> Tuple[str, List[str]]:
    """
    Pick the task to run

    An explicit name wins, then the first positional argument, then "default".
    The positional argument is only consumed when it is used.

    Returns:
        (task name, remaining positional arguments)
    """
    if name:
        return name, list(args)
    if args:
        return args[0], list(args[1:])
    return DEFAULT_TASK, []
