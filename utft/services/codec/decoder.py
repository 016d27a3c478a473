"""UTF-T 解码（词法分类）

UTF-T 每个单元有三种形式：
    0x00-0x7F       单字节 ASCII，码点即字节值，游标 +1
    0x9B b1 b2 b3   4 字节形式，取 b1/b2/b3 各自低 7 位拼成 21 位，再减去 0x0F0000，游标 +4
    其他高位字节    严格模式报错；兼容模式码点取字节本身，游标 +2（实际只用了 1 个字节）

示例: «ç» U+00E7 -> 9B BC 81 E7
    BC 81 E7 -> 011 1100 | 000 0001 | 110 0111 -> 0x0F00E7 -> 0x0F00E7 - 0x0F0000 = 0xE7
"""

from typing import Iterator, Tuple, Union

from utft.models import DecodeMode
from .errors import TruncatedSequence, MalformedSequence, InvalidCodePoint

MARKER = 0x9B
PAYLOAD_SIZE = 3
CODE_POINT_OFFSET = 0x0F0000

BytesLike = Union[bytes, bytearray, memoryview]


def decode_unit(data: BytesLike, index_t: int, mode: DecodeMode = DecodeMode.STRICT) -> Tuple[int, int]:
    """解码 index_t 处的一个 UTF-T 单元

    Args:
        data: UTF-T 字节序列
        index_t: 当前游标，必须小于 len(data)
        mode: 高位单字节的处理方式

    Returns:
        (码点, 游标前进的字节数)

    Raises:
        TruncatedSequence: 0x9B 之后不足 3 个字节
        MalformedSequence: 严格模式下遇到非 0x9B 的高位字节
        InvalidCodePoint: 4 字节形式的载荷小于 0x0F0000
    """
    max_t = len(data)
    b = data[index_t]

    if b == MARKER:
        if index_t + PAYLOAD_SIZE >= max_t:
            raise TruncatedSequence(
                f"位置 {index_t} 的 4 字节序列被截断: 需要 {PAYLOAD_SIZE} 个载荷字节，剩余 {max_t - index_t - 1}",
                position=index_t,
            )
        b1 = data[index_t + 1]
        b2 = data[index_t + 2]
        b3 = data[index_t + 3]
        c = ((b3 & 0x7F) | ((b2 & 0x7F) << 7) | ((b1 & 0x7F) << 14)) - CODE_POINT_OFFSET
        if c < 0:
            raise InvalidCodePoint(
                f"位置 {index_t} 的 4 字节序列载荷低于偏移量 0x0F0000: "
                f"{data[index_t:index_t + 4].hex(' ').upper()}",
                position=index_t,
            )
        return c, PAYLOAD_SIZE + 1

    if b & 0x80:
        if DecodeMode(mode) is DecodeMode.STRICT:
            raise MalformedSequence(f"位置 {index_t} 出现非法的高位字节 {b:#04x}", position=index_t)
        # 只消耗 1 个字节却前进 2，后一个字节被跳过
        return b, 2

    return b, 1


def iter_codepoints(data: BytesLike, mode: DecodeMode = DecodeMode.STRICT) -> Iterator[int]:
    """逐个产出 UTF-T 序列中的码点"""
    for c, _position in iter_units(data, mode):
        yield c


def iter_units(data: BytesLike, mode: DecodeMode = DecodeMode.STRICT) -> Iterator[Tuple[int, int]]:
    """逐个产出 (码点, 单元起始位置)"""
    mode = DecodeMode(mode)
    index_t = 0
    max_t = len(data)
    while index_t < max_t:
        c, consumed = decode_unit(data, index_t, mode)
        yield c, index_t
        index_t += consumed


__all__ = [
    'decode_unit',
    'iter_codepoints',
    'iter_units',
    'MARKER',
    'CODE_POINT_OFFSET',
]
