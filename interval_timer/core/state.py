"""Timer state labels shared by whatever drives the workout clock."""

from __future__ import annotations

from enum import Enum


class TimerState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"
