import asyncio

from litetask import Options, create_tasks

tasks = create_tasks()


async def compile_css(options, subtasks):
    await asyncio.sleep(0.1)


async def compile_js(options, subtasks):
    await asyncio.sleep(0.3)


@tasks.task()
async def assets(options, subtasks):
    """Runs its own tasks in a nested runner, in sequence"""
    nested = subtasks(Options(quiet=options.quiet, run=False))
    nested.add("css", compile_css).add("js", compile_js)

    await nested.run("css")
    await nested.run("js")


@tasks.task(name="default")
async def everything(options, subtasks):
    # Auto-runs its "default" task when awaited
    release = subtasks(Options(quiet=options.quiet))
    release.add("default", assets)
    await release


# python examples/subtasks.py
# python examples/subtasks.py assets --quiet
if __name__ == "__main__":
    tasks.main()
