"""输出缓冲区管理

固定步长扩容的追加式字节缓冲区。每写入一个单元（最多 4 字节）之前先调用
reserve()，保证剩余空间不少于 4 字节。
"""

import logging

from .errors import BufferAllocationError

logger = logging.getLogger(__name__)

DEFAULT_INCREMENT = 512
# 单个码点编码为 UTF-8 最多 4 字节
MAX_UNIT_SIZE = 4


class OutputBuffer:
    def __init__(self, increment: int = DEFAULT_INCREMENT):
        if increment < MAX_UNIT_SIZE:
            raise ValueError(f"扩容步长不能小于 {MAX_UNIT_SIZE}，当前值: {increment}")
        self.increment = increment
        self.grow_count = 0
        self._length = 0
        self._data = self._allocate(increment)

    @staticmethod
    def _allocate(size: int) -> bytearray:
        try:
            return bytearray(size)
        except MemoryError as e:
            raise BufferAllocationError(f"分配输出缓冲区失败 ({size} 字节)") from e

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def free(self) -> int:
        return self.capacity - self._length

    def reserve(self):
        """剩余空间不足 4 字节时按固定步长扩容"""
        if self.free < MAX_UNIT_SIZE:
            self._grow()

    def _grow(self):
        new_capacity = self.capacity + self.increment
        grown = self._allocate(new_capacity)
        grown[:self._length] = self._data[:self._length]
        self._data = grown
        self.grow_count += 1
        logger.debug(f"输出缓冲区扩容至 {new_capacity} 字节 (第 {self.grow_count} 次)")

    def write(self, chunk: bytes):
        end = self._length + len(chunk)
        if end > self.capacity:
            raise BufferError(f"写入越界: length={self._length}, chunk={len(chunk)}, capacity={self.capacity}")
        self._data[self._length:end] = chunk
        self._length = end

    def getvalue(self) -> bytes:
        """返回按实际长度截取的独立副本"""
        return bytes(self._data[:self._length])

    def __len__(self) -> int:
        return self._length


__all__ = ['OutputBuffer', 'DEFAULT_INCREMENT', 'MAX_UNIT_SIZE']
