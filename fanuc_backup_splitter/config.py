"""
Splitter Configuration

Holds the constants used when splitting a FANUC "ALL-PROG" backup:
- Program delimiter and minimum program size
- Output file extension and fallback program name
- Input decoding and writer pool settings
"""

from dataclasses import dataclass, replace
from typing import Optional


# Character found at the top and bottom of each program.
# The control uses it to determine where a program begins and ends.
PROGRAM_DELIMITER = '%'

# Buffers this short are never treated as a program
MINIMUM_PROGRAM_SIZE = 7

# Unix style terminator, independent of the host
LINE_FEED = '\n'

# Subdirectory flag dispersed throughout the backup file
DIRECTORY_FLAG = '&F='

CNC_PROGRAM_FILE_EXTENSION = '.CNC'
DEFAULT_CNC_PROGRAM_NAME = 'Unknown'


@dataclass(frozen=True)
class SplitterConfig:
    """Settings for one split operation."""
    program_delimiter: str = PROGRAM_DELIMITER
    minimum_program_size: int = MINIMUM_PROGRAM_SIZE
    file_extension: str = CNC_PROGRAM_FILE_EXTENSION
    default_program_name: str = DEFAULT_CNC_PROGRAM_NAME
    line_terminator: str = LINE_FEED
    encoding: Optional[str] = None  # None = host default
    encoding_errors: str = 'ignore'
    max_workers: Optional[int] = None  # None = executor default
    show_progress: bool = False

    def with_overrides(self, **overrides) -> 'SplitterConfig':
        """
        Return a copy with the given settings replaced.

        Overrides set to None are ignored, so unset command line options
        can be passed straight through.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


DEFAULT_CONFIG = SplitterConfig()
