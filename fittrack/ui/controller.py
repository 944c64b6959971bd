"""Controller used by the web UI and the CLI."""

from __future__ import annotations

from pathlib import Path

from fittrack.core.settings import DEFAULT_WORKOUT_NAME
from fittrack.workout import stats
from fittrack.workout.errors import ValidationError
from fittrack.workout.export import export_workouts
from fittrack.workout.log import WorkoutLog
from fittrack.workout.model import Exercise, Workout


class TrackerController:
    def __init__(
        self,
        log: WorkoutLog,
        export_path: Path | None = None,
        default_workout: str = DEFAULT_WORKOUT_NAME,
    ) -> None:
        self._log = log
        self._export_path = export_path
        self._default_workout = default_workout

    @property
    def log(self) -> WorkoutLog:
        return self._log

    def initialize(self) -> None:
        self.add_workout(self._default_workout)

    def add_workout(self, name: object) -> Workout:
        """Log a new workout; an existing name returns the logged entry."""
        workout = Workout.create(name)
        if not self._log.log(workout):
            return self._log.find_by_name(workout.name)
        return workout

    def add_exercise(
        self,
        workout_name: str | None,
        *,
        name: object,
        reps: object,
        sets: object,
        weight: object,
        seconds: object,
    ) -> Exercise:
        selected = "" if workout_name is None else str(workout_name).strip()
        if not selected:
            raise ValidationError("Select a workout first.", field="workout", value=workout_name)
        exercise = Exercise.create(name, reps, sets, weight, seconds)
        self._log.add_exercise(selected, exercise)
        return exercise

    def workout_names(self) -> list[str]:
        return self._log.names()

    def workouts_display_text(self) -> str:
        return "".join(workout.describe() + "\n" for workout in self._log.logged_workouts())

    def statistics_text(self) -> str:
        return stats.report(self._log)

    def export(self) -> Path:
        return export_workouts(self._log, self._export_path)
