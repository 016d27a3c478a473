import os
import logging
from logging.handlers import TimedRotatingFileHandler, WatchedFileHandler

from .config.system_settings import Settings
from .models import DecodeMode, TranscodeOptions, TranscodeResult
from .services.codec import (
    transcode,
    try_transcode,
    iter_codepoints,
    encode_codepoint,
    UTFTError,
    DecodeError,
    TruncatedSequence,
    MalformedSequence,
    InvalidCodePoint,
    BufferAllocationError,
)
from .services.utils import utft_to_text, register_codec

__version__ = '0.1.0'


def configure_logging(settings: Settings):
    root_logger = logging.getLogger()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(level)
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s', '%Y-%m-%d %H:%M:%S')
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    # 未配置日志目录时只输出到控制台
    if not settings.LOG_DIR:
        return

    try:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        log_file = os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME)
        # 多进程或外部 logrotate 场景下使用 WatchedFileHandler
        if settings.USE_WATCHED_LOG:
            file_handler = WatchedFileHandler(log_file, encoding='utf-8')
        else:
            file_handler = TimedRotatingFileHandler(log_file, when='midnight', backupCount=settings.LOG_BACKUP_COUNT, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    except OSError as e:
        logging.getLogger(__name__).warning(f'文件日志配置失败: {e}')


__all__ = [
    'transcode',
    'try_transcode',
    'iter_codepoints',
    'encode_codepoint',
    'utft_to_text',
    'register_codec',
    'configure_logging',
    'Settings',
    'DecodeMode',
    'TranscodeOptions',
    'TranscodeResult',
    'UTFTError',
    'DecodeError',
    'TruncatedSequence',
    'MalformedSequence',
    'InvalidCodePoint',
    'BufferAllocationError',
]
