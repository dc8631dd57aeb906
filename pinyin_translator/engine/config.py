import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# 包内自带的默认词典
DEFAULT_DICTS_DIR = Path(__file__).resolve().parent.parent / 'data' / 'dicts'


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class TranslatorConfig:
    """翻译器配置"""
    dicts_dir: str = str(DEFAULT_DICTS_DIR)
    chars_file: str = "chars.csv"
    words_file: str = "words.csv"
    compiled_file: Optional[str] = None    # 预编译词典，存在时优先加载

    # 日志
    log_level: str = "INFO"
    log_to_file: bool = False
    json_logs: bool = False
    log_dir: Optional[str] = None

    @property
    def chars_path(self) -> Path:
        return Path(self.dicts_dir) / self.chars_file

    @property
    def words_path(self) -> Path:
        return Path(self.dicts_dir) / self.words_file

    @property
    def compiled_path(self) -> Optional[Path]:
        if not self.compiled_file:
            return None
        return Path(self.dicts_dir) / self.compiled_file

    @classmethod
    def from_env(cls) -> "TranslatorConfig":
        """从环境变量读取配置，未设置的项使用默认值"""
        defaults = cls()
        return cls(
            dicts_dir=os.getenv("PINYIN_DICTS_DIR", defaults.dicts_dir),
            compiled_file=os.getenv("PINYIN_COMPILED_DICT") or None,
            log_level=os.getenv("PINYIN_LOG_LEVEL", defaults.log_level),
            log_to_file=_env_flag("PINYIN_LOG_TO_FILE", defaults.log_to_file),
            json_logs=_env_flag("PINYIN_JSON_LOGS", defaults.json_logs),
            log_dir=os.getenv("PINYIN_LOG_DIR") or None,
        )
