"""UTF-8 编码

默认阈值沿用 legacy 边界（< 0x7F / < 0x7FF / < 0xFFFF），只作用于 4 字节形式解出的码点
（ASCII 单字节形式由 transcode() 原样写入）。因此 0x7F、0x7FF、0xFFFF 这三个值会被编码为
多一个字节的超长形式：
    0x7F   -> C1 BF
    0x7FF  -> E0 9F BF
    0xFFFF -> F0 8F BF BF
canonical_boundaries=True 时使用标准 UTF-8 阈值（< 0x80 / < 0x800 / < 0x10000）。

4 字节形式的首字节使用标准公式 0xF0 | ((c >> 18) & 0x07)。
"""

from typing import Tuple

from .errors import InvalidCodePoint

MAX_CODE_POINT = 0x10FFFF

# (1 字节上限, 2 字节上限, 3 字节上限)，均为开区间
LEGACY_BOUNDARIES: Tuple[int, int, int] = (0x7F, 0x7FF, 0xFFFF)
CANONICAL_BOUNDARIES: Tuple[int, int, int] = (0x80, 0x800, 0x10000)


def utf8_length(c: int, canonical_boundaries: bool = False) -> int:
    one, two, three = CANONICAL_BOUNDARIES if canonical_boundaries else LEGACY_BOUNDARIES
    if c < one:
        return 1
    if c < two:
        return 2
    if c < three:
        return 3
    return 4


def encode_codepoint(c: int, canonical_boundaries: bool = False) -> bytes:
    """将单个码点编码为 UTF-8 字节序列（1-4 字节）

    Args:
        c: 码点，范围 [0, 0x10FFFF]
        canonical_boundaries: 是否使用标准 UTF-8 长度阈值

    Raises:
        InvalidCodePoint: 码点超出范围
    """
    if c < 0 or c > MAX_CODE_POINT:
        raise InvalidCodePoint(f"码点超出范围: {c:#x}")

    size = utf8_length(c, canonical_boundaries)
    if size == 1:
        return bytes((c,))
    if size == 2:
        return bytes((
            0xC0 | (c >> 6),
            0x80 | (c & 0x3F),
        ))
    if size == 3:
        return bytes((
            0xE0 | (c >> 12),
            0x80 | ((c >> 6) & 0x3F),
            0x80 | (c & 0x3F),
        ))
    return bytes((
        0xF0 | ((c >> 18) & 0x07),
        0x80 | ((c >> 12) & 0x3F),
        0x80 | ((c >> 6) & 0x3F),
        0x80 | (c & 0x3F),
    ))


__all__ = [
    'encode_codepoint',
    'utf8_length',
    'MAX_CODE_POINT',
    'LEGACY_BOUNDARIES',
    'CANONICAL_BOUNDARIES',
]
