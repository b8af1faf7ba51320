################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the info / debug logger.

'''

################################################################################################

import inspect
from datetime import datetime
from typing import List, Optional, Tuple

################################################################################################

def _now() -> str:
    return datetime.now().strftime("%m/%d/%Y %H:%M:%S")

class LogManager():
    __log = None

    def __init__(self, verbosity: int = 0, limit: int = 5000):
        if LogManager.__log is None:
            LogManager.__log = [(_now(), "Begin StackNotes Log")]
        self.verbosity = verbosity
        self.limit = limit

    def add(self, text: str):
        LogManager.__log.append((_now(), text))
        # Keep memory bounded during long drag sessions.
        overflow = len(LogManager.__log) - self.limit
        if overflow > 0:
            del LogManager.__log[:overflow]

    def debug(self, text: str, level: int = 0):
        if self.verbosity < level:
            return

        # Tag with the caller's file name (not the full path).
        stack = inspect.stack()
        if len(stack) > 1:
            filename = stack[1].filename.replace('\\', '/').split('/')[-1]
        else:
            filename = "unknown"
        self.add(f"[{filename}] {text}")

    def get(self, index: Optional[int] = None):
        if index is not None:
            return LogManager.__log[index]
        return LogManager.__log.copy()

    def tail(self, count: int = 20) -> List[Tuple[str, str]]:
        """Most recent `count` entries, oldest first."""
        return LogManager.__log[-count:] if count > 0 else []

    def count(self):
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Clear all log entries."""
        if LogManager.__log is not None:
            LogManager.__log.clear()
            LogManager.__log.append((_now(), "Log cleared"))

    def write_to_file(self, filepath: str):
        """Write all log entries to a file."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for timestamp, message in LogManager.__log:
                    f.write(f"[{timestamp}] {message}\n")
            self.add(f"Log written to file: {filepath}")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")

################################################################################################

Log = LogManager()

################################################################################################
