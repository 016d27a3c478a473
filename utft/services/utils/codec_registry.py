"""把 UTF-T 注册为 Python 标准 codec（仅解码）

注册后即可使用 b'...'.decode('utf-t')、codecs.open(..., encoding='utf-t') 等接口。
编码方向不受支持，调用 str.encode('utf-t') 会抛出 UnicodeEncodeError。
"""

import codecs
import logging
from typing import Optional, Tuple

from utft.models import DecodeMode
from utft.services.codec import decode_unit, DecodeError, TruncatedSequence, InvalidCodePoint

logger = logging.getLogger(__name__)

CODEC_NAME = 'utf-t'
_CODEC_ALIASES = {'utf-t', 'utf_t', 'utft'}

_registered = False


def _bad_unit_end(error: DecodeError, start: int, max_t: int) -> int:
    """出错单元的结束位置（供 errors 处理器跳过）"""
    if isinstance(error, TruncatedSequence):
        return max_t
    if isinstance(error, InvalidCodePoint):
        return start + 4
    return start + 1


def utft_decode(input, errors: str = 'strict', final: bool = True) -> Tuple[str, int]:
    """codec 接口的解码函数，返回 (文本, 已消耗字节数)

    final=False 时，末尾不完整的 4 字节序列留给下一次调用。
    """
    data = bytes(input)
    max_t = len(data)
    chars = []
    index_t = 0
    while index_t < max_t:
        try:
            c, consumed = decode_unit(data, index_t, DecodeMode.STRICT)
        except DecodeError as e:
            if isinstance(e, TruncatedSequence) and not final:
                break
            exc = UnicodeDecodeError(CODEC_NAME, data, index_t, _bad_unit_end(e, index_t, max_t), str(e))
            replacement, index_t = codecs.lookup_error(errors)(exc)
            chars.append(replacement)
            continue
        chars.append(chr(c))
        index_t += consumed
    return ''.join(chars), index_t


def utft_encode(input, errors: str = 'strict'):
    raise UnicodeEncodeError(CODEC_NAME, str(input), 0, len(input), '不支持编码为 UTF-T')


class Codec(codecs.Codec):

    def encode(self, input, errors='strict'):
        return utft_encode(input, errors)

    def decode(self, input, errors='strict'):
        return utft_decode(input, errors, True)


class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
    def _buffer_decode(self, input, errors, final):
        return utft_decode(input, errors, final)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input, final=False):
        return utft_encode(input, self.errors)


class StreamReader(Codec, codecs.StreamReader):
    def decode(self, input, errors='strict'):
        # StreamReader.read() 在流读尽时传入的正是剩余的 bytebuffer，
        # 此时不完整的 4 字节序列不会再有后续数据，按 final 处理
        final = len(input) == len(self.bytebuffer)
        return utft_decode(input, errors, final)


class StreamWriter(Codec, codecs.StreamWriter):
    pass


def getregentry() -> codecs.CodecInfo:
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def codec_search_function(encoding_name: str) -> Optional[codecs.CodecInfo]:
    if encoding_name.lower() in _CODEC_ALIASES:
        return getregentry()
    return None


def register_codec():
    """注册 utf-t codec（重复调用无副作用）"""
    global _registered
    if _registered:
        return
    codecs.register(codec_search_function)
    _registered = True
    logger.debug(f"已注册 codec: {CODEC_NAME}")


__all__ = [
    'CODEC_NAME',
    'register_codec',
    'codec_search_function',
    'getregentry',
    'utft_decode',
]
