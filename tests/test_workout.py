from __future__ import annotations

import pytest

from fittrack.workout.errors import ValidationError
from fittrack.workout.model import Exercise, Workout


def _exercise(name: str = "Bench", seconds: int = 0) -> Exercise:
    return Exercise(name=name, reps=10, sets=3, weight=50.0, duration_sec=seconds)


def test_create_starts_empty() -> None:
    workout = Workout.create(" Leg Day ")

    assert workout.name == "Leg Day"
    assert workout.exercises == ()
    assert workout.duration_minutes() == 0


def test_create_rejects_blank_name() -> None:
    with pytest.raises(ValidationError):
        Workout.create("  ")


def test_add_exercise_keeps_order_and_duplicates() -> None:
    workout = Workout.create("Push")
    bench = _exercise("Bench")
    dips = _exercise("Dips")

    workout.add_exercise(bench)
    workout.add_exercise(dips)
    workout.add_exercise(bench)

    assert [e.name for e in workout.exercises] == ["Bench", "Dips", "Bench"]


def test_add_exercise_rejects_none() -> None:
    workout = Workout.create("Push")

    with pytest.raises(ValidationError):
        workout.add_exercise(None)
    assert workout.exercises == ()


def test_exercises_view_is_read_only() -> None:
    workout = Workout.create("Push")
    workout.add_exercise(_exercise())

    view = workout.exercises
    assert isinstance(view, tuple)
    assert len(workout.exercises) == 1


def test_duration_minutes_truncates() -> None:
    workout = Workout.create("Cardio")
    workout.add_exercise(_exercise(seconds=90))
    assert workout.duration_minutes() == 1

    workout.add_exercise(_exercise(seconds=29))
    assert workout.duration_minutes() == 1

    workout.add_exercise(_exercise(seconds=1))
    assert workout.duration_minutes() == 2


def test_total_volume_sums_exercises() -> None:
    workout = Workout.create("Push")
    workout.add_exercise(_exercise())
    workout.add_exercise(Exercise(name="Dips", reps=12, sets=2, weight=10.0, duration_sec=0))

    assert workout.total_volume() == 1500.0 + 240.0


def test_describe_lists_each_exercise() -> None:
    workout = Workout.create("Push")
    workout.add_exercise(_exercise(seconds=120))

    assert workout.describe() == (
        "Push (1 exercise, 2 min)\n"
        "   - Bench: 10 reps x 3 sets @ 50.00 kg, 120 sec"
    )


def test_exercises_list_is_not_an_init_argument() -> None:
    shared: list[Exercise] = []

    with pytest.raises(TypeError):
        Workout("Push", shared)  # type: ignore[call-arg]
