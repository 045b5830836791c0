"""
Line Classifier

Decides what role a single line of a FANUC backup plays:
- Directory marker (&F=/LIBRARY/ style subdirectory flags)
- Program header (O-number or bracketed 32 character program name)
- Ordinary program content
"""

import re
from enum import Enum

from .config import DIRECTORY_FLAG


# Left side of the OR is an "O number", the original program name structure:
# an "O" followed by 4 to 8 digits.
# Right side is the newer 32 character alphanumeric name, which must end in
# .NC or .CNC. Only the extension is matched case-insensitively.
PROGRAM_NAME_PATTERN = re.compile(r'^(O\d{4,8}|<\w+\.(?i:c?nc)>)', re.MULTILINE)

DIRECTORY_FLAG_PATTERN = re.compile(re.escape(DIRECTORY_FLAG))

SUBFOLDER_TRIM = ' /'


class LineRole(Enum):
    """Role of one backup line."""
    DIRECTORY = "directory"
    HEADER = "header"
    CONTENT = "content"


def is_directory_marker(line: str) -> bool:
    """True when the line carries a subdirectory flag anywhere."""
    return DIRECTORY_FLAG_PATTERN.search(line) is not None


def is_header_marker(line: str) -> bool:
    """True when the line starts with a program name."""
    return PROGRAM_NAME_PATTERN.match(line) is not None


def classify_line(line: str) -> LineRole:
    """
    Classify one line.

    Directory markers win over headers, so a line such as
    "&F=O1234/" only changes the subdirectory.
    """
    if is_directory_marker(line):
        return LineRole.DIRECTORY
    if is_header_marker(line):
        return LineRole.HEADER
    return LineRole.CONTENT


def extract_subfolder(line: str) -> str:
    """
    Strip the directory flag and surrounding slashes/spaces to get the folder.

    Example: "&F=/LIBRARY/ " -> "LIBRARY"
    """
    return DIRECTORY_FLAG_PATTERN.sub('', line).strip(SUBFOLDER_TRIM)
