"""
Splitter configuration tests
"""

from fanuc_backup_splitter.config import DEFAULT_CONFIG, SplitterConfig


def test_defaults():
    assert DEFAULT_CONFIG.program_delimiter == '%'
    assert DEFAULT_CONFIG.minimum_program_size == 7
    assert DEFAULT_CONFIG.file_extension == '.CNC'
    assert DEFAULT_CONFIG.default_program_name == 'Unknown'
    assert DEFAULT_CONFIG.line_terminator == '\n'
    assert DEFAULT_CONFIG.show_progress is False


def test_with_overrides_ignores_none():
    config = DEFAULT_CONFIG.with_overrides(max_workers=4, show_progress=None)
    assert config.max_workers == 4
    assert config.show_progress is False
    # Original untouched
    assert DEFAULT_CONFIG.max_workers is None


def test_with_overrides_returns_new_config():
    config = SplitterConfig().with_overrides(file_extension='.NC')
    assert isinstance(config, SplitterConfig)
    assert config.file_extension == '.NC'
