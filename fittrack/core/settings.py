"""Runtime settings for the fitness tracker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fittrack.workout.export import EXPORT_FILENAME

DEFAULT_WORKOUT_NAME = "Daily Workout"


@dataclass(frozen=True)
class AppSettings:
    host: str = "127.0.0.1"
    port: int = 8090
    export_path: Path = Path(EXPORT_FILENAME)
    default_workout: str = DEFAULT_WORKOUT_NAME
    log_level: str = "INFO"
