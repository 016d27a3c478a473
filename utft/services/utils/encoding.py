"""文本输出辅助工具

数据库侧 utft_to_utf8() 的结果类型是 text；这里提供把 UTF-T 直接转成 str 的便捷函数。
默认阈值下 4 字节形式的 U+007F / U+07FF / U+FFFF 会被编码成超长形式，按 errors 策略处理。
"""

from typing import Optional

from utft.models import TranscodeOptions
from utft.services.codec import transcode


def utft_to_text(data: bytes, options: Optional[TranscodeOptions] = None, errors: str = 'replace') -> str:
    """UTF-T 字节 -> 文本

    Args:
        data: UTF-T 编码的字节
        options: 转码选项
        errors: UTF-8 解码时的错误处理方式 ('replace', 'ignore', 'strict')

    Returns:
        解码后的文本

    Raises:
        DecodeError: UTF-T 输入非法（与 transcode 相同）
        UnicodeDecodeError: errors='strict' 且输出含超长形式
    """
    if not data:
        return ''
    return transcode(data, options).decode('utf-8', errors=errors)


__all__ = [
    'utft_to_text',
]
