"""A file logger that writes timestamped engine reports."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import IO

from yukiengine.chrono import Clock, DateTimeFormat
from yukiengine.errors import CreateLogFileError, raise_error


class Priority(str, Enum):
    """The priority tag of a log message."""

    DEBUG = "DEBUG"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Logger:
    """Writes reports to a ``.ylg`` file named after the time it was opened."""

    def __init__(self, directory: str | Path | None = None, echo: bool = False) -> None:
        self._directory = Path(directory) if directory is not None else Path.cwd()
        self._echo = echo
        self._stream: IO[str] | None = None
        self._path: Path | None = None

    @property
    def path(self) -> Path | None:
        """The log file's path, once created."""
        return self._path

    def create(self) -> None:
        """Open the log file and record the mode the application runs in."""
        name = Clock.date_time_string(DateTimeFormat()) + ".ylg"
        self._path = self._directory / name
        try:
            self._stream = self._path.open("a", encoding="utf-8")
        except OSError:
            self._stream = None
        mode = "DEBUG" if self._echo else "RELEASE"
        self.push_debug_message(f"Application is running in {mode} MODE")

    def destroy(self) -> None:
        """Close the log file."""
        if self._stream is not None:
            self._stream.close()

    def push_message(self, message: str, priority: Priority | str) -> None:
        """Write one report with the given priority tag."""
        tag = priority.value if isinstance(priority, Priority) else str(priority)
        text = f"[YUKI {tag} REPORT] - {Clock.date_time_string()}\n\t{message}\n"
        if self._echo:
            print(text, end="")
        if self._stream is None or self._stream.closed:
            raise_error(CreateLogFileError)
        self._stream.write(text)
        self._stream.flush()

    def push_debug_message(self, message: str) -> None:
        self.push_message(message, Priority.DEBUG)

    def push_warning_message(self, message: str) -> None:
        self.push_message(message, Priority.WARNING)

    def push_error_message(self, message: str) -> None:
        self.push_message(message, Priority.ERROR)

    def __enter__(self) -> Logger:
        self.create()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()