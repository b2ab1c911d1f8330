"""Console results view for captured profiles."""

from __future__ import annotations

from rich.console import Console

from hostprof.core.lifecycle import DisposableStore
from hostprof.session.controller import ProfilingSessionController
from hostprof.session.models import ProfileArtifact, ProfileSessionState


def describe_artifact(artifact: ProfileArtifact | None) -> str:
    if artifact is None:
        return "No profile captured yet."
    word = "function" if artifact.function_count == 1 else "functions"
    return (
        f"Profile {artifact.session_id}: {artifact.duration:.2f}s, "
        f"{artifact.function_count} {word}"
    )


class ConsoleResultsView:
    """Prints the last artifact when opened, and again whenever it changes.

    It is usually opened right after a stop request, before the artifact
    exists. Opened during STOPPING it skips the stored artifact and prints
    the one the stop delivers, then keeps listening until closed.
    """

    def __init__(self, controller: ProfilingSessionController, console: Console | None = None) -> None:
        self._controller = controller
        self._console = console or Console(stderr=True)
        self._disposables = DisposableStore()
        self._disposables.add(controller.last_artifact_changed.subscribe(self._on_artifact_changed))
        self.is_open = False

    def open_results(self) -> None:
        if self.is_open:
            return
        self.is_open = True
        if self._controller.state is ProfileSessionState.STOPPING:
            # The stored artifact belongs to an earlier session
            return
        artifact = self._controller.get_last_artifact()
        if artifact is not None:
            self._render(artifact)

    def close(self) -> None:
        self.is_open = False

    def dispose(self) -> None:
        self.close()
        self._disposables.dispose()

    def _on_artifact_changed(self, artifact: ProfileArtifact | None) -> None:
        if self.is_open and artifact is not None:
            self._render(artifact)

    def _render(self, artifact: ProfileArtifact) -> None:
        self._console.print(f"[green]✓[/green] {describe_artifact(artifact)}")
