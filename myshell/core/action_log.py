"""
Append-only action log

Every state-changing action the user attempts leaves one line here, in the
form `[YYYY-MM-DD HH:MM:SS] message`. The file is never rotated.
"""

import os
import logging
from datetime import datetime
from typing import Callable, Optional, TextIO

logger = logging.getLogger('MyShell.action_log')

class ActionLog:
    """Process-wide sink for action log entries"""

    TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

    def __init__(self, path: str, clock: Callable[[], datetime] = datetime.now):
        self.path = path
        self._clock = clock
        self._handle: Optional[TextIO] = None
        self._warned = False

    def open(self):
        """Create the log file if missing and open it for appending"""
        if self._handle is not None:
            return self
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self._handle = open(self.path, 'a', encoding='utf-8')
        except OSError as e:
            self._warn(f"Cannot open action log {self.path}: {e}")
        return self

    def close(self):
        if self._handle is not None:
            try:
                self._handle.close()
            finally:
                self._handle = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def format_entry(self, message: str) -> str:
        return f"[{self._clock().strftime(self.TIMESTAMP_FORMAT)}] {message}"

    def log(self, message: str):
        """
        Append one entry

        Write failures are reported as warnings and never fail the caller.
        """
        if self._handle is None:
            self.open()
        if self._handle is None:
            return

        try:
            self._handle.write(self.format_entry(message) + '\n')
            self._handle.flush()
        except OSError as e:
            self._warn(f"Cannot write to action log {self.path}: {e}")

    def _warn(self, message: str):
        # Warn once per session, the same failure tends to repeat
        if not self._warned:
            logger.warning(message)
            self._warned = True
        else:
            logger.debug(message)
