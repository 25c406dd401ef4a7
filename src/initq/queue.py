"""Fixed-point run queue for application start-up.

Start-up is reduced to a set of tasks that each know what they depend on.
For example, the command line is read to find the config file, the config
file is read to find the database settings, and the database is connected
with those settings. Each task checks its own prerequisites and returns
``TaskState.RETRY`` until they are in place, so tasks can be added in any
order:

    data = StartupData()
    queue = InitQ()
    queue.add("config", data.read_config)
    queue.add("cmdline", data.parse_command_line)
    queue.add("dbconn", data.connect_database)
    queue.process()

Where a task leaves no detectable trace of success, dependents may name it
explicitly:

    queue.add("settime", set_system_clock)
    queue.add("runsvc", data.run_service, "settime")

A queue of N tasks is satisfiable in at most N passes (worst case ordering
completes one task per pass), plus one pass to confirm it. Anything that needs
more is a cycle or a task that never completes.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from initq.config import InitQSettings
from initq.errors import (
    QueueConfigError,
    QueueFatalError,
    QueueStoppedError,
    QueueUnresolvableError,
    unresolved_message,
)
from initq.models import InitQItem, TaskAction, TaskState

logger = logging.getLogger(__name__)


class InitQ:
    """Ordered collection of start-up tasks and the loop that resolves them."""

    def __init__(self, settings: InitQSettings | None = None) -> None:
        self._settings = settings or InitQSettings()
        self._items: list[InitQItem] = []
        self._defect: str | None = None
        self.passes = 0

    def __len__(self) -> int:
        return len(self._items)

    def add(self, label: str, action: TaskAction | None, *deps: str) -> None:
        """Register a task, optionally naming tasks that must be DONE first.

        Invalid input is a configuration defect. In assertion mode it raises
        ``QueueFatalError`` right away. Otherwise the first defect is kept and
        reported when the queue is processed.
        """

        defect = _registration_defect(label, action, deps)
        if defect is not None:
            if not self._settings.defects_are_errors:
                logger.error("Rejected task registration: %s", defect)
                raise QueueFatalError(defect)
            logger.debug("Rejected task registration: %s", defect)
            if self._defect is None:
                self._defect = defect
            return

        self._items.append(InitQItem(label=label, action=action, deps=tuple(deps)))

    def process(self) -> None:
        """Work the queue until every task is DONE.

        Raises ``QueueStoppedError`` when a task stops the queue. An
        unresolvable queue raises ``QueueFatalError``, or
        ``QueueUnresolvableError`` when defects are configured as errors.
        """

        self._resolve(unresolved_is_error=self._settings.defects_are_errors)

    def try_process(self) -> None:
        """Work the queue, always reporting non-convergence as
        ``QueueUnresolvableError``.

        Use this when satisfiability depends on run-time input rather than on
        how the queue was put together.
        """

        self._resolve(unresolved_is_error=True)

    def is_done(self, label: str) -> bool:
        for item in self._items:
            if item.label == label and item.state is TaskState.DONE:
                return True
        return False

    def states(self) -> dict[str, TaskState]:
        """Return the current state of every task in registration order."""

        return {item.label: item.state for item in self._items}

    def _resolve(self, *, unresolved_is_error: bool) -> None:
        self.passes = 0
        if self._defect is not None:
            raise QueueConfigError(self._defect)
        self._validate()

        max_passes = len(self._items) + 1
        while self.passes < max_passes:
            self.passes += 1
            if self._run_pass():
                logger.info(
                    "run Q satisfied: %d task(s) in %d pass(es)",
                    len(self._items),
                    self.passes,
                )
                return

        unresolved = [item.label for item in self._items if item.state is not TaskState.DONE]
        logger.warning(
            "run Q not satisfied after %d pass(es): %s",
            self.passes,
            ", ".join(unresolved),
        )
        if unresolved_is_error:
            raise QueueUnresolvableError(unresolved)
        raise QueueFatalError(unresolved_message(unresolved))

    def _run_pass(self) -> bool:
        converged = True
        for item in self._items:
            blocked = [dep for dep in item.deps if not self.is_done(dep)]
            if blocked:
                logger.debug("Task %s waiting on %s", item.label, ", ".join(blocked))
                item.state = TaskState.RETRY
                converged = False
                continue

            state = item.run()
            if not isinstance(state, TaskState) or state is TaskState.NOT_RUN:
                self._raise_defect(f"Task {item.label} returned invalid state {state!r}")
            if state is TaskState.STOPPED:
                logger.warning("run Q stopped by task %s", item.label)
                raise QueueStoppedError(item.label)
            if state is TaskState.RETRY:
                logger.debug("Task %s asked to retry", item.label)
                converged = False
        return converged

    def _validate(self) -> None:
        seen: set[str] = set()
        for item in self._items:
            if item.label in seen:
                self._raise_defect(f"Add({item.label}) duplicates an existing task label")
            seen.add(item.label)

        for item in self._items:
            for dep in item.deps:
                if dep not in seen:
                    self._raise_defect(f"Add({item.label}) depends on unknown task {dep!r}")

    def _raise_defect(self, message: str) -> NoReturn:
        if self._settings.defects_are_errors:
            raise QueueConfigError(message)
        logger.error("run Q defect: %s", message)
        raise QueueFatalError(message)


def _registration_defect(
    label: str,
    action: TaskAction | None,
    deps: tuple[str, ...],
) -> str | None:
    if not label:
        return "Add() called with an empty label"
    if action is None or not callable(action):
        return f"Add({label}) called without a callable action"
    if label in deps:
        return f"Add({label}) lists itself as a dependency"
    return None
