import pytest


def _utft_unit(cp: int) -> bytes:
    v = cp + 0x0F0000
    return bytes((0x9B, 0x80 | ((v >> 14) & 0x7F), 0x80 | ((v >> 7) & 0x7F), 0x80 | (v & 0x7F)))


@pytest.fixture
def utft_unit():
    """把码点编成 UTF-T 4 字节形式 (0x9B + 3 个载荷字节)"""
    return _utft_unit


@pytest.fixture
def clean_settings_env(monkeypatch, tmp_path):
    for name in ['UTFT_DECODE_MODE', 'UTFT_BUFFER_INCREMENT', 'UTFT_CANONICAL_BOUNDARIES',
                 'UTFT_LOG_LEVEL', 'UTFT_LOG_DIR', 'UTFT_LOG_FILE', 'UTFT_LOG_BACKUP',
                 'UTFT_USE_WATCHED_LOG']:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('SETTINGS_FILE', str(tmp_path / 'missing-settings.ini'))
    return tmp_path
