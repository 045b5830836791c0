"""
Program name resolution for split programs.
"""

from typing import Optional

from .classifier import PROGRAM_NAME_PATTERN
from .config import DEFAULT_CONFIG, SplitterConfig


def resolve_program_name(program_text: str) -> Optional[str]:
    """
    Search a program for the name in its header.

    Args:
        program_text: The full text of a CNC program

    Returns:
        The first O-number or bracketed name found at the start of any line,
        or None if the program has no recognisable header
    """
    match = PROGRAM_NAME_PATTERN.search(program_text)
    if match:
        return match.group(0)
    return None


def program_file_name(program_text: str, config: Optional[SplitterConfig] = None) -> str:
    """File name for a program, e.g. "O1234.CNC" or "Unknown.CNC"."""
    config = config or DEFAULT_CONFIG
    name = resolve_program_name(program_text) or config.default_program_name
    return name + config.file_extension
