import pytest

from utft import transcode, try_transcode, TranscodeOptions, DecodeMode
from utft import TruncatedSequence, MalformedSequence, InvalidCodePoint


def test_ascii_identity():
    for b in range(0x00, 0x80):
        assert transcode(bytes([b])) == bytes([b])


def test_ascii_del_written_unchanged():
    assert transcode(b'a\x7fb') == b'a\x7fb'
    assert transcode(b'\x7f', TranscodeOptions(canonical_boundaries=True)) == b'\x7f'


def test_four_byte_form_0x7f_uses_legacy_two_byte_form(utft_unit):
    # legacy 1 字节阈值是 < 0x7F，4 字节形式解出的 U+007F 落入 2 字节分支
    assert utft_unit(0x7F) == b'\x9b\xbc\x80\xff'
    assert transcode(b'\x9b\xbc\x80\xff') == b'\xc1\xbf'


def test_four_byte_form_0x7f_with_canonical_boundaries(utft_unit):
    assert transcode(utft_unit(0x7F), TranscodeOptions(canonical_boundaries=True)) == b'\x7f'


@pytest.mark.parametrize('utft, expected', [
    (b'\x9b\xbc\x81\xe7', b'\xc3\xa7'),          # U+00E7 ç
    (b'\x9b\xbc\xc1\xac', b'\xe2\x82\xac'),      # U+20AC €
    (b'\x9b\xc3\xa2\x9e', b'\xf0\x9d\x84\x9e'),  # U+1D11E 𝄞
])
def test_worked_examples(utft, expected):
    assert transcode(utft) == expected


def test_four_byte_leading_byte_uses_canonical_mask():
    assert transcode(b'\x9b\xff\xff\xff') == '\U0010ffff'.encode('utf-8')
    assert transcode(b'\x9b\xc3\xa2\x9e')[0] == 0xF0


def test_empty_input():
    assert transcode(b'') == b''


def test_mixed_text(utft_unit):
    data = b'Prezzo: 5' + utft_unit(0x20AC) + b' ' + utft_unit(0xE7) + utft_unit(0x4E2D)
    assert transcode(data) == 'Prezzo: 5€ ç中'.encode('utf-8')


def test_concatenation_law(utft_unit):
    samples = [
        b'',
        b'abc',
        utft_unit(0xE7),
        utft_unit(0x1D11E) + b'x',
        b'\x00' + utft_unit(0x20AC) + utft_unit(0x10FFFF),
    ]
    for a in samples:
        for b in samples:
            assert transcode(a + b) == transcode(a) + transcode(b)


def test_growth_matches_presized_buffer(utft_unit):
    data = utft_unit(0x1D11E) * 300
    grown = transcode(data)
    presized = transcode(data, TranscodeOptions(buffer_increment=4096))
    assert grown == presized
    assert grown == '𝄞'.encode('utf-8') * 300


def test_growth_with_small_increment(utft_unit):
    data = (b'a' + utft_unit(0x20AC)) * 50
    assert transcode(data, TranscodeOptions(buffer_increment=4)) == 'a€'.encode('utf-8') * 50


def test_accepts_bytearray_and_memoryview(utft_unit):
    data = b'A' + utft_unit(0xE7)
    assert transcode(bytearray(data)) == 'Aç'.encode('utf-8')
    assert transcode(memoryview(data)) == 'Aç'.encode('utf-8')


def test_input_not_mutated(utft_unit):
    data = bytearray(b'A' + utft_unit(0xE7))
    before = bytes(data)
    transcode(data)
    assert bytes(data) == before


@pytest.mark.parametrize('data, position', [
    (b'\x9b', 0),
    (b'ab\x9b\xbc', 2),
    (b'\x9b\xbc\x81', 0),
])
def test_truncated_sequence(data, position):
    with pytest.raises(TruncatedSequence) as exc_info:
        transcode(data)
    assert exc_info.value.position == position


def test_truncated_sequence_in_compatible_mode():
    with pytest.raises(TruncatedSequence):
        transcode(b'ab\x9b\xbc', TranscodeOptions(mode=DecodeMode.COMPATIBLE))


def test_payload_below_offset_is_invalid():
    with pytest.raises(InvalidCodePoint):
        transcode(b'\x9b\x80\x80\x80')


def test_strict_mode_rejects_high_bit_byte():
    with pytest.raises(MalformedSequence) as exc_info:
        transcode(b'A\xc3B')
    assert exc_info.value.position == 1


def test_compatible_mode_skips_following_byte():
    # 0xC3 -> U+00C3 (C3 83)，后面的 'A' 被跳过
    options = TranscodeOptions(mode='compatible')
    assert transcode(b'\xc3AB', options) == b'\xc3\x83B'


def test_compatible_mode_high_bit_byte_at_end():
    assert transcode(b'x\xff', TranscodeOptions(mode=DecodeMode.COMPATIBLE)) == b'x\xc3\xbf'


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        transcode(b'\x9b')


def test_none_input_rejected():
    with pytest.raises(TypeError):
        transcode(None)


def test_str_input_rejected():
    with pytest.raises(TypeError):
        transcode('abc')


def test_try_transcode_success(utft_unit):
    result = try_transcode(b'A' + utft_unit(0xE7))
    assert result.success
    assert result.data == 'Aç'.encode('utf-8')
    assert result.input_length == 5
    assert result.output_length == 3


def test_try_transcode_failure_has_no_partial_data():
    result = try_transcode(b'abc\x9b\xbc')
    assert not result.success
    assert result.data is None
    assert result.error_code == 'TRUNCATED_SEQUENCE'
    assert result.position == 3
    assert result.to_dict()['data'] is None
