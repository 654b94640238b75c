# beatmap_cloner/errors.py

from pathlib import Path


class BeatmapClonerError(Exception):
    """Base exception for beatmap clone operations."""

    def __init__(self, message: str, detail: str = ""):
        self.message = message
        self.detail = detail
        super().__init__(message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class BeatmapNotFoundError(BeatmapClonerError):
    """The source beatmap folder or one of its charts does not exist."""


class NoChartFilesError(BeatmapClonerError):
    """The source beatmap folder holds no .osu files."""


class BeatmapIOError(BeatmapClonerError):
    """A read, write, copy or mkdir failed. Keeps the offending path and OS error."""

    def __init__(self, action: str, path: Path, cause: Exception):
        self.action = action
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to {action}: {self.path}", str(cause))
