"""
Split a FANUC "ALL-PROG" backup file into individual program files.

Programs are written to a folder named like the backup file, with the
subdirectories found on the control recreated inside it.
"""

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from typing import List, Optional

from . import __version__
from .config import DEFAULT_CONFIG
from .writer import BackupSplitter, prepare_output_folder

PROG = "split-fanuc-backup"


def build_date() -> str:
    """Last modification time of the installed package"""
    try:
        mtime = os.path.getmtime(__file__)
    except OSError:
        return ""
    return datetime.fromtimestamp(mtime, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%SZ")


def display_header():
    print()
    print(f"Split FANUC Program Backup Version {__version__} Build Date: {build_date()}")


def display_help():
    print(f"""
At least one argument required. Enter only the full path to the backup file you would like to split.

EXAMPLE:

    {PROG} "/tmp/ALL-PROG.TXT"
""")


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description='Split a FANUC program backup into individual programs')
    parser.add_argument('backup_file', nargs='*', help='Path to the backup file (e.g. ALL-PROG.TXT)')
    parser.add_argument('-o', '--output-dir', help='Folder to write programs to (default: folder named like the backup)')
    parser.add_argument('-w', '--workers', type=positive_int, help='Number of writer threads')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar instead of one line per file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    return parser


def configure_logging(verbose: bool = False, progress: bool = False):
    if verbose:
        level = logging.DEBUG
    elif progress:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format='%(message)s', stream=sys.stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point

    Returns:
        0 on success, 1 for a wrong argument count, 2 when the backup file
        does not exist, the errno (or 3) when it cannot be read
    """
    display_header()

    args = build_parser().parse_args(argv)
    if len(args.backup_file) != 1:
        display_help()
        return 1

    configure_logging(args.verbose, args.progress)

    try:
        backup_file = os.path.abspath(args.backup_file[0])
    except (OSError, ValueError) as e:
        print(e)
        display_help()
        return getattr(e, 'errno', None) or 3

    if not os.path.isfile(backup_file):
        print(f"File not found: {backup_file}")
        return 2

    # Subfolder named like the backup holds all the programs split out of it
    output_folder = prepare_output_folder(backup_file, args.output_dir)
    config = DEFAULT_CONFIG.with_overrides(max_workers=args.workers,
                                           show_progress=args.progress or None)

    print(f"Splitting: {backup_file}")
    print(f"Output to: {output_folder}")

    try:
        summary = BackupSplitter(output_folder, config).split(backup_file)
    except OSError as e:
        print(f"Could not read {backup_file}: {e}")
        return e.errno or 3

    print("\n=== Summary ===")
    print(f"Programs written: {len(summary.created)}")
    print(f"Programs failed: {len(summary.failed)}")
    print(f"Output folder: {output_folder}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
