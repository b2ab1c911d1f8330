"""hostprof profile command - run one profiling session."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click
from rich.console import Console

from hostprof.config.loader import load_config
from hostprof.config.models import HostProfConfig
from hostprof.core.errors import ConfigError
from hostprof.core.logging import configure_logging
from hostprof.indicator.console import ConsoleStatusBar
from hostprof.indicator.status_item import ITEM_ID
from hostprof.session.models import ProfileArtifact, ProfileSessionState
from hostprof.session.protocols import WorkerProfiler
from hostprof.worker.cprofile import CProfileWorker
from hostprof.workbench.profiling import ProfilingWorkbench
from hostprof.workbench.results import ConsoleResultsView


async def run_profile(
    config: HostProfConfig,
    duration: float,
    *,
    worker: WorkerProfiler | None = None,
    console: Console | None = None,
) -> ProfileArtifact | None:
    """Profile for ``duration`` seconds, then stop via the indicator.

    Returns the captured artifact, or None if the session never started or
    its result could not be captured.
    """
    console = console or Console(stderr=True)
    status_bar = ConsoleStatusBar(console)
    workbench = ProfilingWorkbench(
        worker or CProfileWorker(config.worker),
        status_bar,
        lambda controller: ConsoleResultsView(controller, console),
        config,
    )
    controller = workbench.controller
    stopped = asyncio.Event()

    def _on_state(state: ProfileSessionState) -> None:
        if state is ProfileSessionState.IDLE:
            stopped.set()

    registration = controller.state_changed.subscribe(_on_state)
    try:
        starting = controller.start()
        if starting is not None:
            await starting
        if controller.state is not ProfileSessionState.RUNNING:
            return None

        await asyncio.sleep(duration)

        # Same path as a user clicking the status item: stop, then open results
        status_bar.items[ITEM_ID].click()
        await stopped.wait()
        return controller.get_last_artifact()
    finally:
        registration.dispose()
        workbench.dispose()


@click.command()
@click.option(
    "--duration",
    type=click.FloatRange(min=0.0),
    default=5.0,
    show_default=True,
    help="Seconds to profile before stopping.",
)
@click.option(
    "--config-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory containing .hostprof/config.yaml (default: current directory).",
)
@click.pass_context
def profile_command(ctx: click.Context, duration: float, config_root: Path | None) -> None:
    """Profile the worker, showing a live indicator, then print a summary."""
    try:
        config = load_config(config_root)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if ctx.obj and ctx.obj.get("verbose"):
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)

    artifact = asyncio.run(run_profile(config, duration))
    if artifact is None:
        raise click.ClickException("No profile was captured. See the log for details.")
