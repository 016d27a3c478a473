import io

import pytest

from utft.cli import main


@pytest.fixture(autouse=True)
def _env(clean_settings_env):
    return clean_settings_env


def _run(argv, data=b''):
    stdout = io.BytesIO()
    status = main(argv, stdin=io.BytesIO(data), stdout=stdout)
    return status, stdout.getvalue()


def test_stdin_to_stdout(utft_unit):
    status, out = _run([], b'A' + utft_unit(0x20AC))
    assert status == 0
    assert out == 'A€'.encode('utf-8')


def test_files(tmp_path, utft_unit):
    first = tmp_path / 'a.utft'
    second = tmp_path / 'b.utft'
    first.write_bytes(utft_unit(0xE7))
    second.write_bytes(b'!')
    status, out = _run([str(first), str(second)])
    assert status == 0
    assert out == 'ç!'.encode('utf-8')


def test_failed_input_writes_nothing(tmp_path):
    bad = tmp_path / 'bad.utft'
    good = tmp_path / 'good.utft'
    bad.write_bytes(b'ok\x9b\xbc')
    good.write_bytes(b'fine')
    status, out = _run([str(bad), str(good)])
    assert status == 1
    assert out == b'fine'


def test_missing_file(tmp_path):
    status, out = _run([str(tmp_path / 'nope.utft')])
    assert status == 1
    assert out == b''


def test_mode_option():
    assert _run([], b'\xc3AB') == (1, b'')
    assert _run(['--mode', 'compatible'], b'\xc3AB') == (0, b'\xc3\x83B')


def test_canonical_boundaries_option(utft_unit):
    assert _run([], utft_unit(0x7F)) == (0, b'\xc1\xbf')
    assert _run(['--canonical-boundaries'], utft_unit(0x7F)) == (0, b'\x7f')


def test_invalid_increment():
    status, out = _run(['--increment', '2'], b'abc')
    assert status == 2
    assert out == b''
