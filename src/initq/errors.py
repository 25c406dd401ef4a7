"""Error vocabulary shared by the run queue and its callers."""

from __future__ import annotations


class InitQError(RuntimeError):
    """Base class for run queue failures."""


class QueueFatalError(InitQError):
    """Configuration defect or unresolvable queue in assertion mode.

    These are not runtime conditions. They are set-up mistakes that a fixed
    registration sequence reproduces every time, so callers usually exit on
    them.
    """


class QueueConfigError(InitQError):
    """Configuration defect reported as an ordinary error."""


class QueueStoppedError(InitQError):
    """A task requested early termination of the queue."""

    def __init__(self, label: str) -> None:
        super().__init__(f"run Q early termination (stopped by {label})")
        self.label = label


class QueueUnresolvableError(InitQError):
    """The queue could not be satisfied within its pass budget."""

    def __init__(self, unresolved: list[str] | tuple[str, ...]) -> None:
        self._unresolved = tuple(unresolved)
        super().__init__(unresolved_message(self._unresolved))

    @property
    def unresolved_tasks(self) -> list[str]:
        """Labels of the tasks that never reached DONE."""

        return list(self._unresolved)


def unresolved_message(unresolved: list[str] | tuple[str, ...]) -> str:
    if unresolved:
        return f"run Q cannot be satisfied ({','.join(unresolved)} remain)"
    return "run Q cannot be satisfied"
