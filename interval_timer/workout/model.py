"""Workout domain models."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


class PhaseIndexError(IndexError):
    """Raised when a routine is asked for a phase it does not have."""


@dataclass(frozen=True)
class WorkoutPhase:
    name: str
    duration: int | float


@dataclass(frozen=True)
class WorkoutRoutine:
    """Ordered phases of a workout, in the order they are performed.

    ``get_phase`` only accepts positions in ``[0, get_total_phases())``;
    negative and boolean indices raise ``PhaseIndexError``.
    """

    phases: Sequence[WorkoutPhase]

    def get_phase(self, index: int) -> WorkoutPhase:
        total = len(self.phases)
        if isinstance(index, bool) or not 0 <= index < total:
            raise PhaseIndexError(
                f"Phase index {index} out of range for routine with {total} phases"
            )
        return self.phases[index]

    def get_total_phases(self) -> int:
        return len(self.phases)

    @property
    def total_duration(self) -> int | float:
        return sum(phase.duration for phase in self.phases)

    def __len__(self) -> int:
        return self.get_total_phases()

    def __iter__(self) -> Iterator[WorkoutPhase]:
        return iter(self.phases)
