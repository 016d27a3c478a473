"""UTF-T 转码错误类型

所有错误都会中止整个 transcode 调用，不返回部分结果。
"""

from typing import Optional


class UTFTError(Exception):
    """UTF-T 转码错误基类"""

    code = 'UTFT_ERROR'


class DecodeError(UTFTError, ValueError):
    """输入字节序列无法解码（携带出错位置）"""

    code = 'DECODE_ERROR'

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class TruncatedSequence(DecodeError):
    """0x9B 标记后不足 3 个载荷字节"""

    code = 'TRUNCATED_SEQUENCE'


class MalformedSequence(DecodeError):
    """严格模式下出现非 0x9B 的高位字节"""

    code = 'MALFORMED_SEQUENCE'


class InvalidCodePoint(DecodeError):
    """解出的码点不在 [0, 0x10FFFF] 范围内"""

    code = 'INVALID_CODE_POINT'


class BufferAllocationError(UTFTError, MemoryError):
    """输出缓冲区扩容失败（致命错误）"""

    code = 'ALLOCATION_FAILED'


__all__ = [
    'UTFTError',
    'DecodeError',
    'TruncatedSequence',
    'MalformedSequence',
    'InvalidCodePoint',
    'BufferAllocationError',
]
