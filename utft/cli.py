"""命令行入口：读取 UTF-T 原始字节，输出 UTF-8 原始字节

    utft [--mode strict|compatible] [--canonical-boundaries] [--increment N] [FILE ...]

未指定 FILE 或 FILE 为 '-' 时读取标准输入。
"""

import sys
import argparse
import logging
from typing import BinaryIO, List, Optional

from . import configure_logging
from .config.system_settings import Settings
from .models import DecodeMode
from .services.codec import try_transcode

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='utft', description='将 UTF-T 编码的字节转码为 UTF-8')
    parser.add_argument('files', nargs='*', metavar='FILE', help="输入文件，缺省或 '-' 表示标准输入")
    parser.add_argument('--mode', choices=[m.value for m in DecodeMode], default=None,
                        help='高位单字节的处理方式 (默认取配置 decode_mode)')
    parser.add_argument('--canonical-boundaries', action='store_true', default=None,
                        help='使用标准 UTF-8 长度阈值')
    parser.add_argument('--increment', type=int, default=None, help='输出缓冲区扩容步长')
    parser.add_argument('--log-level', default=None, help='日志级别')
    return parser


def _read_input(name: str, stdin: BinaryIO) -> bytes:
    if name == '-':
        return stdin.read()
    with open(name, 'rb') as f:
        return f.read()


def main(argv: Optional[List[str]] = None, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer

    settings = Settings()
    if args.mode is not None:
        settings.DECODE_MODE = args.mode
    if args.canonical_boundaries:
        settings.CANONICAL_BOUNDARIES = True
    if args.increment is not None:
        settings.BUFFER_INCREMENT = args.increment
    if args.log_level:
        settings.LOG_LEVEL = args.log_level.upper()

    configure_logging(settings)
    if not settings.validate():
        logger.error("配置验证失败")
        return 2
    options = settings.to_options()

    status = 0
    for name in args.files or ['-']:
        try:
            data = _read_input(name, stdin)
        except OSError as e:
            logger.error(f"读取输入失败 {name}: {e}")
            status = 1
            continue
        result = try_transcode(data, options)
        if not result.success:
            logger.error(f"{name}: 转码失败 [{result.error_code}] 位置 {result.position}: {result.error}")
            status = 1
            continue
        stdout.write(result.data)
        logger.info(f"{name}: 输入 {result.input_length} 字节 -> 输出 {result.output_length} 字节")
    stdout.flush()
    return status


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
