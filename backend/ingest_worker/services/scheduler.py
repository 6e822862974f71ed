"""Post-response execution of forwarding work."""
from typing import Any, Awaitable, Callable

from fastapi import BackgroundTasks

from ingest_worker.utils.logger import logger


class TaskScheduler:
    """
    Runs work after the response has been sent.

    Wraps the request's ``BackgroundTasks``: the server awaits scheduled
    work once the response is out, for as long as it keeps the request
    alive. Nothing is persisted or retried.
    """

    def __init__(self, background_tasks: BackgroundTasks):
        self.background_tasks = background_tasks

    def schedule(self, func: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> None:
        self.background_tasks.add_task(func, *args, **kwargs)
        logger.debug(f"Scheduled {getattr(func, '__qualname__', func)} after response")


def get_scheduler(background_tasks: BackgroundTasks) -> TaskScheduler:
    """Dependency for the request's task scheduler."""
    return TaskScheduler(background_tasks)
