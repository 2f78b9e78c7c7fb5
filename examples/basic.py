import asyncio
import logging

from litetask import tasks

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@tasks.task()
async def clean(options, subtasks):
    """Simple async task"""
    logging.info("Removing build output")
    await asyncio.sleep(0.2)


@tasks.task()
def lint(options, subtasks):
    """Simple sync task"""
    logging.info(f"Linting (strict={getattr(options, 'strict', False)})")


async def build(options, subtasks):
    await asyncio.sleep(0.5)
    return "dist/app.tar.gz"


tasks.add("build", build).add("default", build)


# python examples/basic.py              -> runs "default"
# python examples/basic.py lint --strict
# python examples/basic.py -q clean
# python examples/basic.py nope         -> lists the tasks
if __name__ == "__main__":
    tasks.main()
