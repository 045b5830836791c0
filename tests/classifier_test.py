"""
Line classifier tests - directory flags, program headers, ordinary lines
"""

import pytest

from fanuc_backup_splitter.classifier import (
    LineRole,
    classify_line,
    extract_subfolder,
    is_directory_marker,
    is_header_marker,
)


@pytest.mark.parametrize("line", [
    "O1234",
    "O1234 (TEST)",
    "O12345678",
    "O00001(OP1)",
    "<PART_1.NC>",
    "<PART_1.CNC>",
    "<A.nc> (lower case extension)",
    "<Bracket_Name.Cnc>",
])
def test_header_lines(line):
    assert is_header_marker(line)
    assert classify_line(line) is LineRole.HEADER


@pytest.mark.parametrize("line", [
    "O123",           # too few digits
    " O1234",         # not at line start
    "o1234",          # O-number is case sensitive
    "N10 O1234",
    "<PART_1.TXT>",
    "<PART-1.NC>",    # '-' is not a word character
    "<PART_1NC>",     # extension needs its dot
    "<>",
    "G90 G54",
    "%",
    "",
])
def test_non_header_lines(line):
    assert not is_header_marker(line)
    assert classify_line(line) is LineRole.CONTENT


def test_nine_digits_still_match_first_eight():
    # Anchored at start only, trailing characters are free
    assert is_header_marker("O123456789")


def test_directory_flag_anywhere_in_line():
    assert is_directory_marker("&F=/LIBRARY/")
    assert is_directory_marker("  &F=SUB")
    assert not is_directory_marker("&F/LIBRARY/")


def test_directory_flag_wins_over_header():
    assert classify_line("O1234 &F=/SUB/") is LineRole.DIRECTORY


@pytest.mark.parametrize("line, expected", [
    ("&F=/LIBRARY/", "LIBRARY"),
    ("&F=  SUBDIR/", "SUBDIR"),
    ("&F=/USER/PATH1/", "USER/PATH1"),
    ("&F=/", ""),
    ("&F=", ""),
    ("&F= MY DIR /", "MY DIR"),
])
def test_extract_subfolder(line, expected):
    assert extract_subfolder(line) == expected
