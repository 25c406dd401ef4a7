"""Worked start-up example: command line, config, database, server, scheduler.

Each step checks the flag its prerequisite sets, so the queue resolves in any
registration order. ``setup_server`` deliberately never records itself, which
leaves ``start_scheduler`` waiting forever when it is included.
"""

from __future__ import annotations

from dataclasses import dataclass

from initq.config import InitQSettings
from initq.models import TaskState
from initq.queue import InitQ

STARTUP_ORDER = ("cmdline", "config", "dbconn", "server")


@dataclass(slots=True)
class StartupData:
    """Application core data filled in by the start-up tasks."""

    cmdline: bool = False
    config: bool = False
    dbconn: bool = False
    server: bool = False
    scheduler: bool = False

    def parse_command_line(self) -> TaskState:
        self.cmdline = True
        return TaskState.DONE

    def read_config(self) -> TaskState:
        # Config location comes from the command line.
        if not self.cmdline:
            return TaskState.RETRY
        self.config = True
        return TaskState.DONE

    def connect_database(self) -> TaskState:
        if not self.config:
            return TaskState.RETRY
        self.dbconn = True
        return TaskState.DONE

    def setup_server(self) -> TaskState:
        if not self.dbconn:
            return TaskState.RETRY
        # self.server is intentionally left unset.
        return TaskState.DONE

    def start_scheduler(self) -> TaskState:
        if not self.server:
            return TaskState.RETRY
        self.scheduler = True
        return TaskState.DONE


def build_startup_queue(
    data: StartupData,
    *,
    reverse: bool = False,
    with_scheduler: bool = False,
    stop_at: str | None = None,
    settings: InitQSettings | None = None,
) -> InitQ:
    """Register the example tasks, optionally in worst-case (reversed) order.

    ``stop_at`` names a task whose action is replaced by one returning
    ``TaskState.STOPPED``.
    """

    actions = {
        "cmdline": data.parse_command_line,
        "config": data.read_config,
        "dbconn": data.connect_database,
        "server": data.setup_server,
    }
    labels = list(STARTUP_ORDER)
    if with_scheduler:
        actions["scheduler"] = data.start_scheduler
        labels.append("scheduler")
    if stop_at is not None:
        if stop_at not in actions:
            raise ValueError(f"Unknown start-up task: {stop_at!r}. Use one of {tuple(labels)}.")
        actions[stop_at] = _stop

    if reverse:
        labels.reverse()

    queue = InitQ(settings)
    for label in labels:
        queue.add(label, actions[label])
    return queue


def _stop() -> TaskState:
    return TaskState.STOPPED
