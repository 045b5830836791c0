"""
Progress tracking for the backup splitter
Console progress bar for programs written out of a backup
"""

import threading
from typing import Optional, TextIO

from tqdm import tqdm


class ConsoleProgressTracker:
    """Console-based progress tracker using tqdm, safe to update from worker threads"""

    def __init__(self, total: Optional[int] = None, desc: str = "Splitting",
                 unit: str = "program", disable: bool = False,
                 file: Optional[TextIO] = None):
        """
        Initialize console progress tracker

        Args:
            total: Total number of items, None when the count is not known up front
            desc: Description shown before progress bar
            unit: Unit name for items being processed
            disable: Suppress all output
            file: Stream to draw on (defaults to stderr)
        """
        self.pbar = tqdm(total=total, desc=desc, unit=unit, disable=disable, file=file)
        self._lock = threading.Lock()
        self.count = 0

    def update(self, n: int = 1, postfix: Optional[str] = None):
        """
        Update progress

        Args:
            n: Number of items completed
            postfix: Optional status text to show after progress bar
        """
        with self._lock:
            self.count += n
            self.pbar.update(n)
            if postfix:
                self.pbar.set_postfix_str(postfix)

    def close(self):
        """Close the progress bar"""
        self.pbar.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
