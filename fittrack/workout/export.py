"""Plain text export of logged workouts."""

from __future__ import annotations

import logging
from pathlib import Path

from fittrack.workout.errors import ExportError
from fittrack.workout.log import WorkoutLog

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "WorkoutData.txt"


def _default_export_path() -> Path:
    return Path.cwd() / EXPORT_FILENAME


def export_lines(log: WorkoutLog) -> list[str]:
    # One line per workout; the multi-line rendering is flattened.
    return [" | ".join(workout.describe().splitlines()) for workout in log.logged_workouts()]


def export_workouts(log: WorkoutLog, path: Path | None = None) -> Path:
    target = (path or _default_export_path()).resolve()
    content = "".join(line + "\n" for line in export_lines(log))
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Failed to export data to {target}: {exc}") from exc
    logger.info("Exported %d workouts to %s", log.count(), target)
    return target
