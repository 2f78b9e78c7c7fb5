from litetask import tasks


class DeployError(Exception):
    def __init__(self, message, code):
        super().__init__(message)
        self.code = code


@tasks.task()
def deploy(options, subtasks):
    raise RuntimeError("boom")


@tasks.task()
def ship(options, subtasks):
    raise DeployError("registry unreachable", code=3)


# python examples/failing.py deploy ; echo $?   -> 1
# python examples/failing.py ship ; echo $?     -> 3
if __name__ == "__main__":
    tasks.main()
