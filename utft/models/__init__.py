"""Codec data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional


class DecodeMode(str, Enum):
    # strict: 非 0x9B 的高位单字节视为非法输入
    STRICT = 'strict'
    # compatible: 码点取该字节本身，游标前进 2（跳过后一个字节）
    COMPATIBLE = 'compatible'


@dataclass
class TranscodeOptions:
    mode: DecodeMode = DecodeMode.STRICT
    buffer_increment: int = 512
    canonical_boundaries: bool = False

    def validate(self):
        errors = []
        try:
            self.mode = DecodeMode(self.mode)
        except ValueError:
            valid_modes = [m.value for m in DecodeMode]
            errors.append(f"解码模式必须是 {'/'.join(valid_modes)} 之一，当前值: {self.mode}")
        if self.buffer_increment < 4:
            errors.append(f"缓冲区扩容步长不能小于 4，当前值: {self.buffer_increment}")
        if errors:
            raise ValueError("参数验证失败: " + "; ".join(errors))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': DecodeMode(self.mode).value,
            'buffer_increment': self.buffer_increment,
            'canonical_boundaries': self.canonical_boundaries
        }


@dataclass
class TranscodeResult:
    success: bool
    data: Optional[bytes] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    position: Optional[int] = None
    input_length: int = 0

    @property
    def output_length(self) -> int:
        return len(self.data) if self.data is not None else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'data': self.data.hex() if self.data is not None else None,
            'error': self.error,
            'error_code': self.error_code,
            'position': self.position,
            'input_length': self.input_length,
            'output_length': self.output_length
        }


__all__ = ['DecodeMode', 'TranscodeOptions', 'TranscodeResult']
