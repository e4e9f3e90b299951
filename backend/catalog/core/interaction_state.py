"""Interaction State: in-memory UI state owned by the interaction controller.

Invariants:
    - is_loading is True exactly while phase is LOADING
    - records is empty until a successful load
    - error holds only user-facing text, never internal failure detail
    - begin() clears error: any new operation starts from a clean slate
    - Mutated only by InteractionController; readers use snapshot()
"""

from dataclasses import dataclass, field

from catalog.core.domain_types import ControllerPhase


@dataclass
class InteractionState:
    """Per-session UI state, pure dataclass, no IO."""

    records: list[dict] = field(default_factory=list)
    phase: ControllerPhase = ControllerPhase.IDLE
    active_filter_value: str = ""
    active_sort: list[dict] = field(default_factory=list)
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.phase is ControllerPhase.LOADING

    def begin(self) -> None:
        self.phase = ControllerPhase.LOADING
        self.error = None

    def settle(self) -> None:
        """Leave LOADING. An error recorded mid-flight keeps the state ERRORED."""
        self.phase = (
            ControllerPhase.ERRORED if self.error else ControllerPhase.READY
        )

    def fail(self, user_message: str) -> None:
        self.phase = ControllerPhase.ERRORED
        self.error = user_message

    def snapshot(self) -> dict:
        """Read model consumed by the Display Surface."""
        return {
            "rows": list(self.records),
            "loading": self.is_loading,
            "error": self.error,
            "phase": self.phase.value,
            "active_filter_value": self.active_filter_value,
            "active_sort": list(self.active_sort),
        }
