import pytest


@pytest.fixture
def write_backup(tmp_path):
    """Write backup lines to ALL-PROG.TXT and return its path"""
    def _write(lines, name="ALL-PROG.TXT", newline="\n"):
        path = tmp_path / name
        path.write_bytes(newline.join(lines).encode("ascii") + newline.encode("ascii"))
        return path
    return _write
