"""UTF-T -> UTF-8 转码服务

transcode() 是纯函数：不读取配置、不共享状态，一次遍历同时完成解码与编码。
任何错误都会中止整个调用，不会返回部分结果。
"""

import logging
from typing import Optional

from utft.models import DecodeMode, TranscodeOptions, TranscodeResult
from .buffer import OutputBuffer
from .decoder import decode_unit, BytesLike
from .encoder import encode_codepoint
from .errors import UTFTError, DecodeError

logger = logging.getLogger(__name__)


def _check_input(data) -> BytesLike:
    if data is None:
        # 宿主负责空值短路，这里不应收到 None
        raise TypeError("transcode() 的输入不能为 None")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"transcode() 需要字节序列，实际类型: {type(data).__name__}")
    if isinstance(data, memoryview) and (data.ndim != 1 or data.itemsize != 1):
        data = data.cast('B')
    return data


def transcode(data: BytesLike, options: Optional[TranscodeOptions] = None) -> bytes:
    """将 UTF-T 字节序列转码为 UTF-8

    Args:
        data: UTF-T 编码的字节序列（bytes / bytearray / memoryview），不会被修改
        options: 解码模式、缓冲区扩容步长、UTF-8 长度阈值；默认严格模式

    Returns:
        按实际长度分配的 UTF-8 字节序列

    Raises:
        TypeError: 输入为 None 或不是字节序列
        DecodeError: 输入截断、非法高位字节或码点越界
        BufferAllocationError: 输出缓冲区扩容失败

    Examples:
        >>> transcode(b'\\x9b\\xbc\\xc1\\xac')
        b'\\xe2\\x82\\xac'
    """
    data = _check_input(data)
    if options is None:
        options = TranscodeOptions()
    options.validate()
    mode = DecodeMode(options.mode)

    buffer = OutputBuffer(options.buffer_increment)
    index_t = 0
    max_t = len(data)
    while index_t < max_t:
        c, consumed = decode_unit(data, index_t, mode)
        buffer.reserve()
        if consumed == 1:
            # ASCII 单字节形式原样写入，长度阈值只作用于解码出来的码点
            buffer.write(bytes((c,)))
        else:
            buffer.write(encode_codepoint(c, options.canonical_boundaries))
        index_t += consumed

    result = buffer.getvalue()
    logger.debug(f"转码完成: 输入 {max_t} 字节, 输出 {len(result)} 字节, 扩容 {buffer.grow_count} 次")
    return result


def try_transcode(data: BytesLike, options: Optional[TranscodeOptions] = None) -> TranscodeResult:
    """transcode() 的结果对象版本，失败时返回 success=False 而不抛出 UTFTError"""
    input_length = len(data) if isinstance(data, (bytes, bytearray, memoryview)) else 0
    try:
        output = transcode(data, options)
    except DecodeError as e:
        logger.warning(f"UTF-T 解码失败 [{e.code}]: {e}")
        return TranscodeResult(success=False, error=str(e), error_code=e.code,
                               position=e.position, input_length=input_length)
    except UTFTError as e:
        logger.error(f"UTF-T 转码失败 [{e.code}]: {e}", exc_info=True)
        return TranscodeResult(success=False, error=str(e), error_code=e.code,
                               input_length=input_length)
    return TranscodeResult(success=True, data=output, input_length=input_length)


__all__ = ['transcode', 'try_transcode']
