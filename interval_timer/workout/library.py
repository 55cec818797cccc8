"""Built-in interval routines, including the default 4x4 session."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from interval_timer.workout.model import WorkoutPhase, WorkoutRoutine

logger = logging.getLogger(__name__)

WARM_UP = "Warm Up"
ROUND = "Round"
REST = "Rest"
COOL_DOWN = "Cool Down"

DEFAULT_PHASE_DURATION = 2
DEFAULT_ROUTINE_KEY = "4x4"


@dataclass(frozen=True)
class RoutineTemplate:
    key: str
    name: str
    routine: WorkoutRoutine


four_by_four = WorkoutRoutine(
    (
        WorkoutPhase(WARM_UP, 2),
        WorkoutPhase(ROUND, 2),
        WorkoutPhase(REST, 2),
        WorkoutPhase(ROUND, 2),
        WorkoutPhase(REST, 2),
        WorkoutPhase(ROUND, 2),
        WorkoutPhase(REST, 2),
        WorkoutPhase(ROUND, 2),
        WorkoutPhase(COOL_DOWN, 2),
    )
)


def _check_duration(
    name: str, value: int | float | None, *, optional: bool = False
) -> None:
    if value is None and optional:
        return
    if value is None or not value > 0:
        raise ValueError(f"{name} must be > 0, got {value}")


def build_interval_routine(
    rounds: int,
    *,
    round_duration: int | float = DEFAULT_PHASE_DURATION,
    rest_duration: int | float = DEFAULT_PHASE_DURATION,
    warm_up_duration: int | float | None = DEFAULT_PHASE_DURATION,
    cool_down_duration: int | float | None = DEFAULT_PHASE_DURATION,
) -> WorkoutRoutine:
    """Build ``rounds`` work rounds separated by rests.

    No rest follows the last round. Pass ``None`` for the warm-up or
    cool-down duration to leave that phase out.
    """
    if rounds <= 0:
        raise ValueError(f"rounds must be > 0, got {rounds}")
    _check_duration("round_duration", round_duration)
    _check_duration("rest_duration", rest_duration)
    _check_duration("warm_up_duration", warm_up_duration, optional=True)
    _check_duration("cool_down_duration", cool_down_duration, optional=True)

    phases: list[WorkoutPhase] = []
    if warm_up_duration is not None:
        phases.append(WorkoutPhase(WARM_UP, warm_up_duration))
    for i in range(rounds):
        if i > 0:
            phases.append(WorkoutPhase(REST, rest_duration))
        phases.append(WorkoutPhase(ROUND, round_duration))
    if cool_down_duration is not None:
        phases.append(WorkoutPhase(COOL_DOWN, cool_down_duration))

    logger.debug("Built interval routine: %d rounds, %d phases", rounds, len(phases))
    return WorkoutRoutine(tuple(phases))


ROUTINES: tuple[RoutineTemplate, ...] = (
    RoutineTemplate(key=DEFAULT_ROUTINE_KEY, name="4x4 Intervals", routine=four_by_four),
    RoutineTemplate(
        key="3x5",
        name="3x5 Intervals",
        routine=build_interval_routine(3, round_duration=5),
    ),
    RoutineTemplate(
        key="8x1",
        name="8x1 Intervals",
        routine=build_interval_routine(8, round_duration=1, rest_duration=1),
    ),
)


def list_routines() -> tuple[RoutineTemplate, ...]:
    return ROUTINES


def get_routine(key: str = DEFAULT_ROUTINE_KEY) -> WorkoutRoutine:
    template = next((item for item in ROUTINES if item.key == key), None)
    if template is None:
        logger.debug("No built-in routine with key %r", key)
        raise ValueError(f"Unknown workout routine '{key}'")
    return template.routine
