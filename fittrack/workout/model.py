"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass, field

from fittrack.workout.errors import ValidationError
from fittrack.workout.parser import parse_float_field, parse_int_field, parse_name

SECONDS_PER_MINUTE = 60


@dataclass(frozen=True)
class Exercise:
    name: str
    reps: int
    sets: int
    weight: float
    duration_sec: int

    @classmethod
    def create(
        cls,
        name: object,
        reps: object,
        sets: object,
        weight: object,
        duration_sec: object,
    ) -> Exercise:
        """Build an exercise from raw form values, validating every field."""
        return cls(
            name=parse_name(name),
            reps=parse_int_field(raw=reps, field_name="reps"),
            sets=parse_int_field(raw=sets, field_name="sets"),
            weight=parse_float_field(raw=weight, field_name="weight"),
            duration_sec=parse_int_field(raw=duration_sec, field_name="duration_sec"),
        )

    def volume(self) -> float:
        return float(self.reps) * float(self.sets) * self.weight

    def describe(self) -> str:
        return (
            f"{self.name}: {self.reps} reps x {self.sets} sets "
            f"@ {self.weight:.2f} kg, {self.duration_sec} sec"
        )


@dataclass(eq=False)
class Workout:
    name: str
    _exercises: list[Exercise] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def create(cls, name: object) -> Workout:
        return cls(name=parse_name(name, field_name="workout_name"))

    @property
    def exercises(self) -> tuple[Exercise, ...]:
        return tuple(self._exercises)

    def add_exercise(self, exercise: Exercise | None) -> None:
        if exercise is None:
            raise ValidationError("Exercise cannot be empty.", field="exercise")
        self._exercises.append(exercise)

    @property
    def total_duration_sec(self) -> int:
        return sum(exercise.duration_sec for exercise in self._exercises)

    def duration_minutes(self) -> int:
        # Whole minutes, truncated.
        return self.total_duration_sec // SECONDS_PER_MINUTE

    def total_volume(self) -> float:
        return sum((exercise.volume() for exercise in self._exercises), 0.0)

    def summary(self) -> str:
        count = len(self._exercises)
        noun = "exercise" if count == 1 else "exercises"
        return f"{self.name} ({count} {noun}, {self.duration_minutes()} min)"

    def describe(self) -> str:
        lines = [self.summary()]
        lines.extend(f"   - {exercise.describe()}" for exercise in self._exercises)
        return "\n".join(lines)
