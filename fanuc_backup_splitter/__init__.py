"""
FANUC Program Backup Splitter
Splits a FANUC "ALL-PROG" backup into one file per program.

Supports:
- O-number program names (O0001 - O99999999)
- 32 character program names (<NAME.NC> / <NAME.CNC>)
- Subdirectory flags (&F=/LIBRARY/), recreated as output folders
"""

__version__ = "1.0.0"
__author__ = "Split FANUC Program Backup"

from .config import SplitterConfig
from .classifier import LineRole, classify_line
from .splitter import ProgramUnit, finalize_program_text, iter_program_units
from .naming import resolve_program_name
from .writer import BackupSplitter, SplitSummary, split_backup_file

__all__ = [
    'SplitterConfig',
    'LineRole',
    'classify_line',
    'ProgramUnit',
    'finalize_program_text',
    'iter_program_units',
    'resolve_program_name',
    'BackupSplitter',
    'SplitSummary',
    'split_backup_file',
]
