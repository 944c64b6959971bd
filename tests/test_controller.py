from __future__ import annotations

from pathlib import Path

import pytest

from fittrack.ui.controller import TrackerController
from fittrack.workout.errors import ValidationError, WorkoutNotFoundError
from fittrack.workout.log import WorkoutLog


def _controller(tmp_path: Path) -> TrackerController:
    controller = TrackerController(WorkoutLog(), export_path=tmp_path / "WorkoutData.txt")
    controller.initialize()
    return controller


def test_initialize_logs_default_workout(tmp_path: Path) -> None:
    controller = _controller(tmp_path)

    assert controller.workout_names() == ["Daily Workout"]


def test_add_workout_with_existing_name_keeps_first(tmp_path: Path) -> None:
    controller = _controller(tmp_path)
    controller.add_exercise(
        "Daily Workout", name="Bench", reps="10", sets="3", weight="50", seconds="60"
    )

    workout = controller.add_workout("Daily Workout")

    assert controller.workout_names() == ["Daily Workout"]
    assert len(workout.exercises) == 1


def test_form_flow_to_statistics(tmp_path: Path) -> None:
    controller = _controller(tmp_path)
    controller.add_workout("Leg Day")
    controller.add_exercise(
        "Leg Day", name="Squat", reps="5", sets="5", weight="100", seconds="600"
    )
    controller.add_exercise(
        "Daily Workout", name="Bench", reps="10", sets="3", weight="50.0", seconds="0"
    )

    assert controller.workout_names() == ["Daily Workout", "Leg Day"]
    assert controller.workouts_display_text() == (
        "Daily Workout (1 exercise, 0 min)\n"
        "   - Bench: 10 reps x 3 sets @ 50.00 kg, 0 sec\n"
        "Leg Day (1 exercise, 10 min)\n"
        "   - Squat: 5 reps x 5 sets @ 100.00 kg, 600 sec\n"
    )
    assert controller.statistics_text() == (
        "Total Workouts: 2\nTotal Volume: 4000.00 kg\nAverage Workout Duration: 5.00 minutes"
    )


def test_add_exercise_requires_selection(tmp_path: Path) -> None:
    controller = _controller(tmp_path)

    with pytest.raises(ValidationError) as excinfo:
        controller.add_exercise(None, name="Bench", reps="1", sets="1", weight="1", seconds="1")

    assert excinfo.value.field == "workout"


def test_add_exercise_to_unknown_workout(tmp_path: Path) -> None:
    controller = _controller(tmp_path)

    with pytest.raises(WorkoutNotFoundError):
        controller.add_exercise(
            "Leg Day", name="Bench", reps="1", sets="1", weight="1", seconds="1"
        )


def test_invalid_exercise_input_leaves_workout_untouched(tmp_path: Path) -> None:
    controller = _controller(tmp_path)

    with pytest.raises(ValidationError):
        controller.add_exercise(
            "Daily Workout", name="Bench", reps="ten", sets="3", weight="50", seconds="0"
        )

    assert controller.log.find_by_name("Daily Workout").exercises == ()


def test_export_uses_configured_path(tmp_path: Path) -> None:
    controller = _controller(tmp_path)

    out = controller.export()

    assert out == (tmp_path / "WorkoutData.txt").resolve()
    assert out.read_text(encoding="utf-8") == "Daily Workout (0 exercises, 0 min)\n"


def test_add_exercise_trims_selected_workout(tmp_path: Path) -> None:
    controller = _controller(tmp_path)

    controller.add_exercise(
        "  Daily Workout ", name="Bench", reps="10", sets="3", weight="50", seconds="0"
    )

    assert len(controller.log.find_by_name("Daily Workout").exercises) == 1
