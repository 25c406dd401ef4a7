"""Startup run queue of self-checking initialization tasks."""

from initq.config import InitQSettings
from initq.errors import (
    InitQError,
    QueueConfigError,
    QueueFatalError,
    QueueStoppedError,
    QueueUnresolvableError,
)
from initq.models import InitQItem, TaskAction, TaskState
from initq.queue import InitQ

__version__ = "0.3.0"

__all__ = [
    "InitQ",
    "InitQError",
    "InitQItem",
    "InitQSettings",
    "QueueConfigError",
    "QueueFatalError",
    "QueueStoppedError",
    "QueueUnresolvableError",
    "TaskAction",
    "TaskState",
    "__version__",
]
