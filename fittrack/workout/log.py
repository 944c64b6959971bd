"""In-memory, name-deduplicated log of workouts."""

from __future__ import annotations

import logging
import threading

from fittrack.workout.errors import ValidationError, WorkoutNotFoundError
from fittrack.workout.model import Exercise, Workout

logger = logging.getLogger(__name__)


class WorkoutLog:
    """Ordered collection holding at most one workout per name.

    Mutations go through a single lock so concurrent UI handlers cannot
    log two workouts under the same name.
    """

    def __init__(self) -> None:
        self._workouts: list[Workout] = []
        self._lock = threading.Lock()

    def log(self, workout: Workout | None) -> bool:
        """Append ``workout`` unless its name is already logged.

        Returns False when an existing entry was kept instead.
        """
        if workout is None:
            raise ValidationError("Workout cannot be empty.", field="workout")
        with self._lock:
            if self._find(workout.name) is not None:
                logger.info("Workout '%s' already logged, keeping existing entry", workout.name)
                return False
            self._workouts.append(workout)
        logger.debug("Logged workout '%s'", workout.name)
        return True

    def remove(self, name: str) -> bool:
        with self._lock:
            workout = self._find(name)
            if workout is None:
                return False
            self._workouts.remove(workout)
        logger.debug("Removed workout '%s'", name)
        return True

    def add_exercise(self, workout_name: str | None, exercise: Exercise) -> Workout:
        with self._lock:
            workout = self._find(workout_name)
            if workout is None:
                raise WorkoutNotFoundError(workout_name)
            workout.add_exercise(exercise)
        logger.debug("Added '%s' to workout '%s'", exercise.name, workout.name)
        return workout

    def logged_workouts(self) -> tuple[Workout, ...]:
        return tuple(self._workouts)

    def find_by_name(self, name: str | None) -> Workout:
        workout = self._find(name)
        if workout is None:
            raise WorkoutNotFoundError(name)
        return workout

    def count(self) -> int:
        return len(self._workouts)

    def names(self) -> list[str]:
        return [workout.name for workout in self._workouts]

    def _find(self, name: str | None) -> Workout | None:
        for workout in self._workouts:
            if workout.name == name:
                return workout
        return None
