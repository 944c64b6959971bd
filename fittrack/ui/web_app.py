"""NiceGUI web UI for the fitness tracker."""

from __future__ import annotations

import logging
from typing import Callable

from nicegui import ui

from fittrack.core.settings import AppSettings
from fittrack.ui.controller import TrackerController
from fittrack.workout.errors import TrackerError
from fittrack.workout.log import WorkoutLog

logger = logging.getLogger(__name__)


def run_web_ui(settings: AppSettings, log: WorkoutLog | None = None) -> int:
    controller = TrackerController(
        log if log is not None else WorkoutLog(),
        export_path=settings.export_path,
        default_workout=settings.default_workout,
    )
    ui.add_head_html(
        """
        <style>
          .ft-display {
            white-space: pre-wrap;
            font-family: monospace;
            min-height: 240px;
          }
        </style>
        """
    )

    with ui.column().classes("w-full max-w-3xl mx-auto gap-3"):
        ui.label("Fitness Tracker App").classes("text-xl font-semibold")
        ui.label("Welcome to the Fitness Tracker App!").classes("text-sm text-gray-500")
        with ui.card().classes("w-full"):
            workout_select = ui.select([], label="Select Workout").classes("w-full")
            name_input = ui.input("Name").classes("w-full")
            with ui.row().classes("w-full gap-2"):
                reps_input = ui.input("Reps").props("inputmode=numeric")
                sets_input = ui.input("Sets").props("inputmode=numeric")
                weight_input = ui.input("Weight").props("inputmode=decimal")
                seconds_input = ui.input("Seconds").props("inputmode=numeric")
        with ui.card().classes("w-full"):
            display_area = ui.label("").classes("ft-display w-full")
        with ui.row().classes("w-full gap-2"):
            add_workout_btn = ui.button("Add Workout")
            add_exercise_btn = ui.button("Add Exercise")
            clear_btn = ui.button("Clear").props("outline")
            display_btn = ui.button("Display Workouts")
            export_btn = ui.button("Export Data")
            stats_btn = ui.button("View Stats")

    with ui.dialog() as workout_dialog, ui.card():
        ui.label("Workout name:")
        workout_name_input = ui.input("Workout name")
        with ui.row().classes("w-full justify-end gap-2"):
            cancel_workout_btn = ui.button("Cancel").props("outline")
            save_workout_btn = ui.button("OK").props("color=primary")

    with ui.dialog() as message_dialog, ui.card():
        message_label = ui.label("").classes("ft-display")
        ui.button("OK", on_click=lambda: message_dialog.close())

    def show_message(message: str) -> None:
        message_label.set_text(message)
        message_dialog.open()

    def guarded(action: str, handler: Callable[[], None]) -> Callable[[], None]:
        def _run() -> None:
            try:
                handler()
            except TrackerError as exc:
                logger.warning("%s failed: %s", action, exc)
                ui.notify(f"Failed to {action}: {exc}", color="negative")

        return _run

    def refresh_ui() -> None:
        display_area.set_text(controller.workouts_display_text())
        names = controller.workout_names()
        selected = workout_select.value if workout_select.value in names else None
        if selected is None and names:
            selected = names[0]
        workout_select.set_options(names, value=selected)

    def on_open_workout_dialog() -> None:
        workout_name_input.set_value("")
        workout_dialog.open()

    def on_save_workout() -> None:
        workout = controller.add_workout(workout_name_input.value)
        workout_dialog.close()
        refresh_ui()
        workout_select.set_value(workout.name)

    def on_add_exercise() -> None:
        controller.add_exercise(
            workout_select.value,
            name=name_input.value,
            reps=reps_input.value,
            sets=sets_input.value,
            weight=weight_input.value,
            seconds=seconds_input.value,
        )
        refresh_ui()
        ui.notify("Exercise added successfully.", color="positive")

    def on_clear() -> None:
        for field in (name_input, reps_input, sets_input, weight_input, seconds_input):
            field.set_value("")
        display_area.set_text("")

    def on_display_workouts() -> None:
        show_message(controller.workouts_display_text() or "No workouts logged yet.")

    def on_export() -> None:
        path = controller.export()
        ui.notify(f"Data exported successfully to {path}", color="positive")

    def on_view_stats() -> None:
        show_message(controller.statistics_text())

    add_workout_btn.on_click(on_open_workout_dialog)
    save_workout_btn.on_click(guarded("add workout", on_save_workout))
    cancel_workout_btn.on_click(workout_dialog.close)
    add_exercise_btn.on_click(guarded("add exercise", on_add_exercise))
    clear_btn.on_click(on_clear)
    display_btn.on_click(on_display_workouts)
    export_btn.on_click(guarded("export data", on_export))
    stats_btn.on_click(guarded("view stats", on_view_stats))

    controller.initialize()
    refresh_ui()
    ui.run(host=settings.host, port=settings.port, reload=False, title="Fitness Tracker")
    return 0
