"""
Backup Splitter

Single pass scanner that cuts an "ALL-PROG" line stream into program units.

Each unit is paired with the subdirectory it lived in on the control.
Subdirectory flags only apply to the programs that follow them, so a flag
first flushes the program in the buffer under the previous subdirectory.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from .classifier import LineRole, classify_line, extract_subfolder
from .config import DEFAULT_CONFIG, SplitterConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgramUnit:
    """One program split out of the backup"""
    subfolder: str  # "" when the program sits in the output root
    text: str


def finalize_program_text(content: str, config: Optional[SplitterConfig] = None) -> str:
    """
    Make sure a program is wrapped in delimiters top and bottom.

    Args:
        content: Raw buffer contents for one program
        config: Splitter settings (delimiter, threshold, terminator)

    Returns:
        The program text. Content at or below the minimum size is returned
        untouched.
    """
    config = config or DEFAULT_CONFIG
    delimiter = config.program_delimiter
    line_feed = config.line_terminator

    if len(content) <= config.minimum_program_size:
        return content

    # Add % to the top
    if content[0] != delimiter:
        content = delimiter + line_feed + content

    content = content.rstrip()

    # Add % to the bottom when missing, on its own line
    if content[-1] != delimiter:
        content = content + line_feed + delimiter + line_feed

    return content


def iter_program_units(lines: Iterable[str],
                       on_directory: Optional[Callable[[str], None]] = None,
                       config: Optional[SplitterConfig] = None) -> Iterator[ProgramUnit]:
    """
    Split a stream of backup lines into program units.

    The stream is consumed lazily, only one program is buffered at a time.
    The final buffer is always yielded once the lines run out, even when it
    is too short to be a real program.

    Args:
        lines: Backup lines without terminators
        on_directory: Called with each new subfolder as soon as its flag is
            read, before any program belonging to it is yielded
        config: Splitter settings

    Yields:
        ProgramUnit for every completed program
    """
    config = config or DEFAULT_CONFIG
    content = []
    content_length = 0
    subfolder = ""

    for line in lines:
        role = classify_line(line)

        if role is LineRole.DIRECTORY:
            if content_length > config.minimum_program_size:
                # New subdirectory only applies to subsequent programs
                yield ProgramUnit(subfolder, finalize_program_text(''.join(content), config))
                content.clear()
                content_length = 0

            subfolder = extract_subfolder(line)
            logger.debug(f"Subdirectory flag: '{subfolder}'")
            if on_directory is not None:
                on_directory(subfolder)

            # Flag never becomes part of a program
            continue

        if role is LineRole.HEADER:
            if content_length > config.minimum_program_size:
                yield ProgramUnit(subfolder, finalize_program_text(''.join(content), config))

            # Header starts a new program, anything too short before it is dropped
            content.clear()
            content_length = 0

        content.append(line)
        content.append(config.line_terminator)
        content_length += len(line) + len(config.line_terminator)

    yield ProgramUnit(subfolder, finalize_program_text(''.join(content), config))


def read_backup_lines(file_path: str, config: Optional[SplitterConfig] = None) -> Iterator[str]:
    """
    Lazily read a backup file line by line.

    Any terminator style is accepted. Opening errors propagate to the caller
    as soon as the generator is first advanced.
    """
    config = config or DEFAULT_CONFIG
    with open(file_path, 'r', encoding=config.encoding, errors=config.encoding_errors) as f:
        for line in f:
            yield line.rstrip('\r\n')


def split_backup_lines(file_path: str,
                       on_directory: Optional[Callable[[str], None]] = None,
                       config: Optional[SplitterConfig] = None) -> Iterator[ProgramUnit]:
    """Read a backup file and yield its programs (see iter_program_units)."""
    return iter_program_units(read_backup_lines(file_path, config), on_directory, config)
