"""
pinyin_translator - 汉字转拼音

基于词典的从右向左最大匹配分词，支持多音字词、带调/无调输出
"""

__version__ = "0.1.0"

from pinyin_translator.engine import (
    PinyinTranslator,
    create_translator,
    Segment,
    SegmentKind,
    TranslatorConfig,
    Dictionary,
    build_dictionary,
    load_dictionary,
    compile_dictionary,
    load_compiled_dictionary,
    substring,
    strip_tones,
    TONE_MARKS,
    PinyinTranslatorError,
    OutOfRangeError,
    DictionaryError,
)

__all__ = [
    "__version__",
    # 引擎
    "PinyinTranslator",
    "create_translator",
    "Segment",
    "SegmentKind",
    "TranslatorConfig",
    # 词典
    "Dictionary",
    "build_dictionary",
    "load_dictionary",
    "compile_dictionary",
    "load_compiled_dictionary",
    # 工具
    "substring",
    "strip_tones",
    "TONE_MARKS",
    # 异常
    "PinyinTranslatorError",
    "OutOfRangeError",
    "DictionaryError",
]
