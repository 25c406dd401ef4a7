"""CLI entrypoint for initq."""

import logging

import rich_click as click

from initq import __version__
from initq.controllers import DemoCommand, InitQCliController

click.rich_click.USE_MARKDOWN = True
CONTROLLER = InitQCliController()


@click.group()
@click.version_option(version=__version__, prog_name="initq")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every queue pass.")
def initq(verbose: bool) -> None:
    """Start-up run queue CLI."""

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op when the host already configured the root logger.
    logging.getLogger("initq").setLevel(logging.DEBUG if verbose else logging.WARNING)


@initq.command("demo")
@click.option(
    "--reverse",
    is_flag=True,
    default=False,
    help="Register tasks in worst-case (reversed) order.",
)
@click.option(
    "--with-scheduler",
    is_flag=True,
    default=False,
    help="Add the scheduler task, which can never be satisfied.",
)
@click.option("--stop-at", default=None, help="Task that stops the queue instead of running.")
@click.option(
    "--try",
    "try_mode",
    is_flag=True,
    default=False,
    help="Report an unresolvable queue with its remaining tasks.",
)
@click.option(
    "--defects-are-errors",
    is_flag=True,
    default=False,
    help="Report configuration defects as errors. Also set by INITQ_DEFECTS_ARE_ERRORS.",
)
def demo(
    reverse: bool,
    with_scheduler: bool,
    stop_at: str | None,
    try_mode: bool,
    defects_are_errors: bool,
) -> None:
    """Resolve the example cmdline / config / dbconn / server start-up."""

    result = CONTROLLER.demo(
        DemoCommand(
            reverse=reverse,
            with_scheduler=with_scheduler,
            stop_at=stop_at,
            try_mode=try_mode,
            defects_are_errors=defects_are_errors,
        ),
    )
    _emit_lines(result.lines)
    if not result.success:
        raise click.ClickException("Start-up queue was not satisfied.")


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    initq()
