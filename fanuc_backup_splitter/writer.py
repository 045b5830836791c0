"""
Program Writer

Writes the programs split out of a backup to individual files:
- Recreates the subdirectories found on the control
- Names each file after the program header
- Writes files on a thread pool so reading the backup is never held up
"""

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .config import DEFAULT_CONFIG, SplitterConfig
from .naming import program_file_name
from .progress_tracker import ConsoleProgressTracker
from .splitter import ProgramUnit, split_backup_lines

logger = logging.getLogger(__name__)


@dataclass
class SplitSummary:
    """Outcome of splitting one backup file"""
    created: List[str] = field(default_factory=list)  # paths written
    failed: List[str] = field(default_factory=list)  # paths that could not be written
    superseded: int = 0  # programs replaced by a later one with the same name

    @property
    def total(self) -> int:
        return len(self.created) + len(self.failed)


def is_safe_subfolder(subfolder: str) -> bool:
    """False for subfolders that would escape the output folder ("../x", "/x")"""
    if os.path.isabs(subfolder):
        return False
    parts = subfolder.replace('\\', '/').split('/')
    return '..' not in parts


def default_output_folder(backup_file: str) -> str:
    """Folder named like the backup file, next to it: /tmp/ALL-PROG.TXT -> /tmp/ALL-PROG"""
    backup_file = os.path.abspath(backup_file)
    stem = os.path.splitext(os.path.basename(backup_file))[0]
    return os.path.join(os.path.dirname(backup_file), stem)


def prepare_output_folder(backup_file: str, requested: Optional[str] = None) -> str:
    """
    Create the folder that will hold all the programs split out of a backup.

    Args:
        backup_file: Path to the backup file
        requested: Explicit output folder, defaults to one named like the backup

    Returns:
        The folder to write into. Falls back to the backup file's own
        directory when the folder cannot be created.
    """
    output_folder = requested or default_output_folder(backup_file)
    try:
        os.makedirs(output_folder, exist_ok=True)
    except OSError as e:
        fallback = os.path.dirname(os.path.abspath(backup_file))
        logger.warning(f"Could not create {output_folder} ({e}), writing to {fallback}")
        output_folder = fallback
    return output_folder


class BackupSplitter:
    """Splits a backup file into program files below one output folder"""

    def __init__(self, output_folder: str, config: Optional[SplitterConfig] = None):
        """
        Args:
            output_folder: Destination the programs are written to
            config: Splitter settings
        """
        self.output_folder = output_folder
        self.config = config or DEFAULT_CONFIG
        self._unavailable_subfolders: Set[str] = set()
        self._lock = threading.Lock()
        # Sequence number of the last program queued for each output path
        self._latest: Dict[str, int] = {}
        self._path_locks: Dict[str, threading.Lock] = {}

    def ensure_subfolder(self, subfolder: str):
        """
        Create an output subdirectory as soon as its flag is read.

        A subdirectory that cannot be created, or that points outside the
        output folder, is remembered so its programs land in the output root
        instead.
        """
        path = os.path.join(self.output_folder, subfolder)
        if not is_safe_subfolder(subfolder):
            logger.warning(f"Refusing subdirectory outside the output folder: {subfolder}")
            self._unavailable_subfolders.add(subfolder)
            return
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create subdirectory {path}: {e}")
            self._unavailable_subfolders.add(subfolder)
        else:
            self._unavailable_subfolders.discard(subfolder)

    def target_folder(self, subfolder: str) -> str:
        """Folder a program from the given subdirectory is written to"""
        if not subfolder or subfolder in self._unavailable_subfolders:
            return self.output_folder
        return os.path.join(self.output_folder, subfolder)

    def _queue_path(self, output_filename: str, sequence: int):
        with self._lock:
            self._latest[output_filename] = sequence
            self._path_locks.setdefault(output_filename, threading.Lock())

    def write_unit(self, unit: ProgramUnit, output_filename: str, sequence: int,
                   summary: SplitSummary, tracker: ConsoleProgressTracker) -> bool:
        """
        Write one program. Failures are reported and recorded, never raised.

        Programs sharing an output path are written in backup order; one that
        has already been followed by a later program with the same name is
        not written at all, so the last one in the backup always wins.

        Returns:
            True if the file was written
        """
        with self._lock:
            path_lock = self._path_locks[output_filename]

        with path_lock:
            with self._lock:
                superseded = self._latest[output_filename] != sequence
            if superseded:
                logger.info(f"SUPERSEDED: {output_filename}")
                with self._lock:
                    summary.superseded += 1
                tracker.update(1, postfix="superseded")
                return False

            try:
                with open(output_filename, 'w', encoding=self.config.encoding,
                          errors=self.config.encoding_errors, newline='') as f:
                    f.write(unit.text)
            except (OSError, ValueError) as e:
                code = getattr(e, 'errno', None)
                logger.error(f"ERROR {code}: {e}" if code is not None else f"ERROR: {e}")
                logger.error(f"FAILED TO CREATE FILE: {output_filename}")
                with self._lock:
                    summary.failed.append(output_filename)
                tracker.update(1, postfix="failed")
                return False

        logger.info(f"CREATED FILE: {output_filename}")
        with self._lock:
            summary.created.append(output_filename)
        tracker.update(1)
        return True

    def split(self, backup_file: str) -> SplitSummary:
        """
        Split a backup file and write every program in it.

        Args:
            backup_file: Full path to "ALL-PROG.TXT"

        Returns:
            SplitSummary of the files written

        Raises:
            OSError: The backup file cannot be opened or read
        """
        summary = SplitSummary()
        units = split_backup_lines(backup_file, on_directory=self.ensure_subfolder,
                                   config=self.config)

        with ConsoleProgressTracker(disable=not self.config.show_progress) as tracker:
            # Pool decouples reading the backup from writing the programs
            futures = []
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                for sequence, unit in enumerate(units):
                    output_filename = os.path.join(self.target_folder(unit.subfolder),
                                                   program_file_name(unit.text, self.config))
                    self._queue_path(output_filename, sequence)
                    futures.append(executor.submit(self.write_unit, unit, output_filename,
                                                   sequence, summary, tracker))

        # Re-raise anything unexpected from a worker
        for future in futures:
            future.result()

        return summary


def split_backup_file(backup_file: str, output_folder: str,
                      config: Optional[SplitterConfig] = None) -> SplitSummary:
    """Split a backup file into program files below output_folder."""
    return BackupSplitter(output_folder, config).split(backup_file)
