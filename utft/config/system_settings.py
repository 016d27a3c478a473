"""转码配置 - 统一的配置参数管理

transcode() 本身是纯函数，不读取这里的配置；只有命令行入口会用 Settings 构造选项。
"""
import os
import sys
import logging
import configparser
from dataclasses import dataclass, field
from pathlib import Path

from utft.models import TranscodeOptions

logger = logging.getLogger(__name__)


def _get_config_file() -> str:
    """获取配置文件路径（环境变量 > 可执行文件目录 > 当前目录 > 项目根目录）"""
    if env_config := os.getenv("SETTINGS_FILE"):
        logger.debug(f"[config] Using config from env: {env_config}")
        return env_config

    # PyInstaller 打包后配置文件在可执行文件同目录
    if getattr(sys, 'frozen', False):
        exe_dir = os.path.dirname(os.path.abspath(sys.executable))
        exe_config = os.path.join(exe_dir, "settings.ini")
        if os.path.exists(exe_config):
            logger.debug(f"[config] Using config from exe dir: {exe_config}")
            return exe_config
        logger.warning(f"[config] Config file not found in exe dir: {exe_config}")

    cwd_config = Path.cwd() / "settings.ini"
    if cwd_config.exists():
        logger.debug(f"[config] Using config from cwd: {cwd_config}")
        return str(cwd_config)

    root_config = Path(__file__).parent.parent.parent / "settings.ini"
    if root_config.exists():
        logger.debug(f"[config] Using config from root: {root_config}")
        return str(root_config)

    # 文件不存在时使用默认值
    return str(cwd_config)


def _load_config() -> configparser.ConfigParser:
    """加载外部配置文件"""
    config = configparser.ConfigParser()
    config_file = _get_config_file()

    if os.path.exists(config_file):
        # 尝试多种编码
        for encoding in ['utf-8', 'utf-8-sig', 'gbk', 'latin-1']:
            try:
                config.read(config_file, encoding=encoding)
            except (UnicodeDecodeError, configparser.Error) as e:
                logger.debug(f"[config] Failed to read with encoding {encoding}: {e}")
                continue
            if config.sections():
                logger.debug(f"[config] Loaded {config_file} ({encoding}), sections: {config.sections()}")
                break
        else:
            logger.error(f"[config] Failed to read config file with any encoding: {config_file}")

    return config


def _get_bool(env_name: str, default: bool, config_section: str = None, config_key: str = None) -> bool:
    """解析布尔值：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        return str(raw).strip().lower() in {"1", "true", "yes", "y", "on"}

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            try:
                return _config.getboolean(config_section, config_key)
            except ValueError:
                logger.warning(f"[config] Invalid boolean for [{config_section}] {config_key}, using default")

    return default


def _get_int(env_name: str, default: int, config_section: str = None, config_key: str = None) -> int:
    """解析整数：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        try:
            return int(raw) if raw.strip() else default
        except ValueError:
            logger.warning(f"[config] Invalid integer in {env_name}: {raw!r}")

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            try:
                return _config.getint(config_section, config_key)
            except ValueError:
                logger.warning(f"[config] Invalid integer for [{config_section}] {config_key}, using default")

    return default


def _get_str(env_name: str, default: str, config_section: str = None, config_key: str = None) -> str:
    """解析字符串：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        return raw

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            return _config.get(config_section, config_key)

    return default


def _settings_field(getter, env_name, default, section, key):
    return field(default_factory=lambda: getter(env_name, default, section, key))


@dataclass
class Settings:
    """转码配置类 - 优先级：环境变量 > settings.ini > 默认值

    每次实例化时重新解析，便于测试中通过 monkeypatch 修改环境变量。
    """

    # ===== 转码配置 =====
    DECODE_MODE: str = _settings_field(_get_str, "UTFT_DECODE_MODE", "strict", "codec", "decode_mode")
    BUFFER_INCREMENT: int = _settings_field(_get_int, "UTFT_BUFFER_INCREMENT", 512, "codec", "buffer_increment")
    CANONICAL_BOUNDARIES: bool = _settings_field(_get_bool, "UTFT_CANONICAL_BOUNDARIES", False, "codec", "canonical_boundaries")

    # ===== 日志配置 =====
    LOG_LEVEL: str = _settings_field(_get_str, "UTFT_LOG_LEVEL", "INFO", "log", "log_level")
    LOG_DIR: str = _settings_field(_get_str, "UTFT_LOG_DIR", "", "log", "log_dir")
    LOG_FILE_NAME: str = _settings_field(_get_str, "UTFT_LOG_FILE", "utft.log", "log", "log_file")
    LOG_BACKUP_COUNT: int = _settings_field(_get_int, "UTFT_LOG_BACKUP", 7, "log", "log_backup_count")
    USE_WATCHED_LOG: bool = _settings_field(_get_bool, "UTFT_USE_WATCHED_LOG", False, "log", "use_watched_log")

    # ===== 方法 =====
    def to_options(self) -> TranscodeOptions:
        """转换为 transcode() 的选项"""
        options = TranscodeOptions(
            mode=self.DECODE_MODE.strip().lower(),
            buffer_increment=self.BUFFER_INCREMENT,
            canonical_boundaries=self.CANONICAL_BOUNDARIES,
        )
        options.validate()
        return options

    def validate(self) -> bool:
        """验证配置并创建日志目录"""
        try:
            self.to_options()
        except ValueError as e:
            logger.error(f"[config] {e}")
            return False

        if self.LOG_DIR and not os.path.exists(self.LOG_DIR):
            try:
                os.makedirs(self.LOG_DIR, exist_ok=True)
            except OSError as e:
                logger.error(f"[config] 无法创建日志目录 {self.LOG_DIR}: {e}")
                return False

        return True


__all__ = ['Settings']
