"""A logger that collects messages and writes them to a file on flush."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import List, Optional, Union

DEFAULT_LOG_PATH = "log.txt"


class SimpleLogger:
    """Collects log messages in memory and writes them to disk on flush."""

    def __init__(self, path: Union[str, Path] = DEFAULT_LOG_PATH) -> None:
        self.path = Path(path)
        self._messages: List[str] = []
        # the first successful flush replaces the log file, later ones append
        self._discard_previous_file = True

    def log(self, message: str) -> None:
        """Add a regular message."""
        timestamp = time.strftime("[%d.%m.%Y %H:%M:%S] ", time.localtime())
        self._messages.append(f"{timestamp}\n{message}")

    def warn(self, message: str) -> None:
        """Add a warning message."""
        self.log("WARNING: " + message)

    def error(self, message: str) -> None:
        """Add an error message."""
        self.log("ERROR: " + message)

    def flush(self) -> None:
        """Write the collected messages to the log file."""
        if not self._messages:
            return
        mode = "w" if self._discard_previous_file else "a"
        try:
            with self.path.open(mode, encoding="utf-8") as log_file:
                for message in self._messages:
                    log_file.write(message + "\n")
        except OSError:
            print("Exception occurred when writing to the log file\n", file=sys.stderr)
            return
        self._discard_previous_file = False

    @property
    def messages(self) -> List[str]:
        """The messages collected so far."""
        return list(self._messages)


_logger: Optional[SimpleLogger] = None


def get_logger() -> SimpleLogger:
    """Return the shared application logger."""
    global _logger
    if _logger is None:
        _logger = SimpleLogger()
    return _logger