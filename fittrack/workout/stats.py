"""Aggregate statistics over a workout log."""

from __future__ import annotations

from dataclasses import dataclass

from fittrack.workout.log import WorkoutLog
from fittrack.workout.model import Workout


@dataclass(frozen=True)
class WorkoutStats:
    total_workouts: int
    total_volume: float
    average_duration_minutes: float

    def render(self) -> str:
        return (
            f"Total Workouts: {self.total_workouts:d}\n"
            f"Total Volume: {self.total_volume:.2f} kg\n"
            f"Average Workout Duration: {self.average_duration_minutes:.2f} minutes"
        )


def total_workouts(log: WorkoutLog) -> int:
    return log.count()


def total_volume(log: WorkoutLog) -> float:
    return _total_volume(log.logged_workouts())


def average_duration_minutes(log: WorkoutLog) -> float:
    return _average_duration(log.logged_workouts())


def compute_stats(log: WorkoutLog) -> WorkoutStats:
    workouts = log.logged_workouts()
    return WorkoutStats(
        total_workouts=len(workouts),
        total_volume=_total_volume(workouts),
        average_duration_minutes=_average_duration(workouts),
    )


def report(log: WorkoutLog) -> str:
    return compute_stats(log).render()


def _total_volume(workouts: tuple[Workout, ...]) -> float:
    return sum((workout.total_volume() for workout in workouts), 0.0)


def _average_duration(workouts: tuple[Workout, ...]) -> float:
    if not workouts:
        return 0.0
    return sum(workout.duration_minutes() for workout in workouts) / len(workouts)
