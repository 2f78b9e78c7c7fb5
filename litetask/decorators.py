from typing import Optional

from litetask.runner import TaskRunner, tasks


def task(name: Optional[str] = None, *, runner: Optional[TaskRunner] = None):
    """
    Decorator to register a task function

    Args:
        name: Task name (defaults to function name)
        runner: Runner to register on (defaults to litetask.tasks)

    Example:
        @task()
        async def build(options, subtasks):
            ...

        @task(name="default")
        def everything(options, subtasks):
            ...
    """

    def decorator(f):
        target = tasks if runner is None else runner
        target.add(name or f.__name__, f)
        return f

    return decorator
