from __future__ import annotations

from interval_timer.core.state import TimerState


def test_timer_state_literals() -> None:
    assert TimerState.STOPPED.value == "stopped"
    assert TimerState.RUNNING.value == "running"
    assert TimerState.PAUSED.value == "paused"
    assert TimerState.FINISHED.value == "finished"


def test_timer_state_values_are_distinct() -> None:
    values = [state.value for state in TimerState]
    assert len(values) == 4
    assert len(set(values)) == 4


def test_timer_state_compares_and_parses_as_string() -> None:
    assert TimerState.PAUSED == "paused"
    assert TimerState("finished") is TimerState.FINISHED
