"""Domain models for the initialization run queue."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class TaskState(str, Enum):
    """Resolution states reported by task actions."""

    NOT_RUN = "not_run"
    RETRY = "retry"
    DONE = "done"
    STOPPED = "stopped"


TaskAction = Callable[[], TaskState]


@dataclass(slots=True)
class InitQItem:
    """One registered initialization task plus its explicit dependencies.

    Dependencies name other items that must be DONE before the action is
    offered a chance to run. They are used when a task has no other way to
    detect that its prerequisite has completed.
    """

    label: str
    action: TaskAction
    deps: tuple[str, ...] = ()
    state: TaskState = field(default=TaskState.NOT_RUN)

    def run(self) -> TaskState:
        """Invoke the action unless the item already finished.

        A result that is not a resolution state (or is NOT_RUN) is returned
        to the caller without being stored.
        """

        if self.state in (TaskState.NOT_RUN, TaskState.RETRY):
            result = self.action()
            if not isinstance(result, TaskState) or result is TaskState.NOT_RUN:
                return result
            self.state = result
        return self.state
