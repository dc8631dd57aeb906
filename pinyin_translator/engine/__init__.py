from .config import TranslatorConfig, DEFAULT_DICTS_DIR
from .errors import PinyinTranslatorError, OutOfRangeError, DictionaryError
from .text import substring, char_count
from .tones import TONE_MARKS, strip_tones
from .dictionary import (
    Dictionary,
    build_dictionary,
    load_dictionary,
    compile_dictionary,
    load_compiled_dictionary,
    resolve_dictionary,
)
from .core import PinyinTranslator, Segment, SegmentKind
from .logging import setup_logging, get_logger, get_api_logger, get_engine_logger


def create_translator(config: TranslatorConfig = None) -> PinyinTranslator:
    """
    创建翻译器

    Args:
        config: 翻译器配置（可选，默认使用包内自带词典）

    Returns:
        PinyinTranslator 实例

    Raises:
        DictionaryError: 词典缺失或格式错误
    """
    config = config or TranslatorConfig()
    setup_logging(
        'pinyin_translator.engine',
        level=config.log_level,
        log_to_file=config.log_to_file,
        json_format=config.json_logs,
        log_dir=config.log_dir,
    )
    return PinyinTranslator(resolve_dictionary(config))


__all__ = [
    # 引擎
    'PinyinTranslator',
    'create_translator',
    'Segment',
    'SegmentKind',
    'TranslatorConfig',
    'DEFAULT_DICTS_DIR',
    # 词典
    'Dictionary',
    'build_dictionary',
    'load_dictionary',
    'compile_dictionary',
    'load_compiled_dictionary',
    'resolve_dictionary',
    # 工具
    'substring',
    'char_count',
    'strip_tones',
    'TONE_MARKS',
    # 异常
    'PinyinTranslatorError',
    'OutOfRangeError',
    'DictionaryError',
    # 日志
    'setup_logging',
    'get_logger',
    'get_api_logger',
    'get_engine_logger',
]
