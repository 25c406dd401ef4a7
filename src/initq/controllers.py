"""Controllers for initq CLI commands."""

from __future__ import annotations

from dataclasses import dataclass, replace

from initq.config import InitQSettings
from initq.errors import InitQError, QueueUnresolvableError
from initq.startup import StartupData, build_startup_queue


@dataclass(slots=True)
class DemoCommand:
    """CLI input for the worked start-up example."""

    reverse: bool
    with_scheduler: bool
    stop_at: str | None
    try_mode: bool
    defects_are_errors: bool


@dataclass(slots=True)
class DemoResult:
    """Start-up report to render in CLI."""

    lines: list[str]
    success: bool


class InitQCliController:
    """Builds and resolves run queues for CLI commands."""

    def demo(self, command: DemoCommand) -> DemoResult:
        settings = InitQSettings.from_env()
        if command.defects_are_errors:
            settings = replace(settings, defects_are_errors=True)

        data = StartupData()
        try:
            queue = build_startup_queue(
                data,
                reverse=command.reverse,
                with_scheduler=command.with_scheduler,
                stop_at=command.stop_at,
                settings=settings,
            )
        except ValueError as error:
            return DemoResult(lines=["Start-up queue:", str(error)], success=False)

        lines = [f"Start-up queue: {len(queue)} task(s)"]
        success = True
        try:
            if command.try_mode:
                queue.try_process()
            else:
                queue.process()
        except QueueUnresolvableError as error:
            success = False
            lines.append(f"Unresolved: {', '.join(error.unresolved_tasks)}")
        except InitQError as error:
            success = False
            lines.append(f"Failed: {error}")
        else:
            lines.append(f"Satisfied in {queue.passes} pass(es)")

        lines.extend(f"  {label}: {state.value}" for label, state in queue.states().items())
        return DemoResult(lines=lines, success=success)
