import pytest

from utft.models import DecodeMode, TranscodeOptions, TranscodeResult


def test_options_validate_ok():
    options = TranscodeOptions(mode='compatible')
    options.validate()  # should not raise
    assert options.mode is DecodeMode.COMPATIBLE


def test_options_invalid_mode():
    with pytest.raises(ValueError):
        TranscodeOptions(mode='lenient').validate()


def test_options_invalid_increment():
    with pytest.raises(ValueError):
        TranscodeOptions(buffer_increment=2).validate()


def test_options_to_dict():
    assert TranscodeOptions().to_dict() == {
        'mode': 'strict',
        'buffer_increment': 512,
        'canonical_boundaries': False
    }


def test_result_to_dict():
    result = TranscodeResult(success=True, data=b'\xc3\xa7', input_length=4)
    assert result.to_dict()['data'] == 'c3a7'
    assert result.to_dict()['output_length'] == 2
