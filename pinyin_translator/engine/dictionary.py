"""
词典加载模块

两个数据源（UTF-8，逐行逗号分隔）：
- chars.csv: 字,拼音            例如 "网,wǎng"
- words.csv: 词,拼音1,拼音2,... 例如 "网名,wǎng,míng"（每个字一个拼音）

加载结果是不可变的 Dictionary，数据有误时直接抛 DictionaryError，
不会返回只加载了一半的词典。
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

import orjson

from .errors import DictionaryError
from .logging import get_engine_logger, log_execution_time

logger = get_engine_logger()

# 预编译词典格式版本
COMPILED_VERSION = 1

PathLike = Union[str, Path]


@dataclass(frozen=True)
class Dictionary:
    """字表 + 词表 + 最大词长"""
    chars: Mapping[str, str]
    words: Mapping[str, Tuple[str, ...]]
    max_word_len: int
    longest_word: str = ""

    @property
    def char_count(self) -> int:
        return len(self.chars)

    @property
    def word_count(self) -> int:
        return len(self.words)


def _split_record(line: str) -> list:
    return [field.strip() for field in line.strip().split(',')]


def parse_char_line(line: str, source: str = None, line_no: int = None) -> Tuple[str, str]:
    """解析字表一行: 字,拼音"""
    fields = _split_record(line)
    if len(fields) != 2:
        raise DictionaryError(f"字表每行应为 '字,拼音'，实际: {line.strip()!r}", source, line_no)

    key, unit = fields
    if len(key) != 1:
        raise DictionaryError(f"字表的键必须是单个字符: {key!r}", source, line_no)
    if not unit:
        raise DictionaryError(f"'{key}' 缺少拼音", source, line_no)
    return key, unit


def parse_word_line(line: str, source: str = None, line_no: int = None) -> Tuple[str, Tuple[str, ...]]:
    """解析词表一行: 词,拼音1,拼音2,..."""
    fields = _split_record(line)
    key, units = fields[0], tuple(fields[1:])

    if len(key) < 2:
        raise DictionaryError(f"词表的键至少两个字符: {key!r}", source, line_no)
    if len(units) != len(key):
        raise DictionaryError(
            f"'{key}' 有 {len(key)} 个字，却给了 {len(units)} 个拼音", source, line_no
        )
    if not all(units):
        raise DictionaryError(f"'{key}' 含有空拼音", source, line_no)
    return key, units


def build_dictionary(
    char_lines: Iterable[str],
    word_lines: Iterable[str],
    chars_source: str = "chars",
    words_source: str = "words",
) -> Dictionary:
    """
    由字表、词表的原始行构建词典

    空行跳过；重复的键以后出现的为准。
    """
    chars = {}
    for line_no, line in enumerate(char_lines, 1):
        if not line.strip():
            continue
        key, unit = parse_char_line(line, chars_source, line_no)
        chars[key] = unit

    words = {}
    longest_word = ""
    for line_no, line in enumerate(word_lines, 1):
        if not line.strip():
            continue
        key, units = parse_word_line(line, words_source, line_no)
        words[key] = units
        if len(key) > len(longest_word):
            longest_word = key

    return Dictionary(
        chars=MappingProxyType(chars),
        words=MappingProxyType(words),
        max_word_len=len(longest_word) or 1,
        longest_word=longest_word,
    )


def _read_lines(path: Path) -> list:
    if not path.is_file():
        raise DictionaryError("词典文件不存在", str(path))
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read().splitlines()


@log_execution_time(logger)
def load_dictionary(chars_path: PathLike, words_path: PathLike) -> Dictionary:
    """从 chars.csv / words.csv 加载词典"""
    chars_path, words_path = Path(chars_path), Path(words_path)
    dictionary = build_dictionary(
        _read_lines(chars_path),
        _read_lines(words_path),
        chars_source=str(chars_path),
        words_source=str(words_path),
    )
    logger.info(
        f"词典加载完成: {dictionary.char_count} 字, {dictionary.word_count} 词, "
        f"最大词长 {dictionary.max_word_len}"
    )
    return dictionary


def compile_dictionary(
    chars_path: PathLike,
    words_path: PathLike,
    out_path: PathLike,
) -> Dictionary:
    """
    将 CSV 词典编译成单个 JSON 文件，加载更快

    Returns:
        编译所用的 Dictionary
    """
    dictionary = load_dictionary(chars_path, words_path)

    payload = {
        'version': COMPILED_VERSION,
        'max_word_len': dictionary.max_word_len,
        'longest_word': dictionary.longest_word,
        'chars': dict(dictionary.chars),
        'words': {k: list(v) for k, v in dictionary.words.items()},
    }

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, 'wb') as f:
        f.write(orjson.dumps(payload))

    logger.info(f"已编译词典: {out_path} (最长词 {dictionary.max_word_len}-{dictionary.longest_word})")
    return dictionary


@log_execution_time(logger)
def load_compiled_dictionary(path: PathLike) -> Dictionary:
    """加载 compile_dictionary 生成的 JSON 词典（同样做格式校验）"""
    path = Path(path)
    if not path.is_file():
        raise DictionaryError("词典文件不存在", str(path))

    with open(path, 'rb') as f:
        try:
            payload = orjson.loads(f.read())
        except orjson.JSONDecodeError as e:
            raise DictionaryError(f"JSON 解析失败: {e}", str(path)) from e

    if not isinstance(payload, dict) or payload.get('version') != COMPILED_VERSION:
        raise DictionaryError("不支持的词典版本", str(path))

    chars = payload.get('chars')
    words = payload.get('words')
    if not isinstance(chars, dict) or not isinstance(words, dict):
        raise DictionaryError("缺少 chars / words 字段", str(path))

    for key, units in words.items():
        if not isinstance(units, list) or not all(isinstance(u, str) for u in units):
            raise DictionaryError(f"'{key}' 的拼音必须是字符串列表", str(path))
    for key, unit in chars.items():
        if not isinstance(unit, str):
            raise DictionaryError(f"'{key}' 的拼音必须是字符串", str(path))

    # 复用 CSV 的校验规则
    dictionary = build_dictionary(
        (f"{key},{unit}" for key, unit in chars.items()),
        (",".join([key, *units]) for key, units in words.items()),
        chars_source=f"{path}#chars",
        words_source=f"{path}#words",
    )

    stored_len = payload.get('max_word_len')
    if stored_len != dictionary.max_word_len:
        raise DictionaryError(
            f"max_word_len 不一致: 文件记录 {stored_len}, 实际 {dictionary.max_word_len}", str(path)
        )

    logger.info(f"预编译词典加载完成: {dictionary.char_count} 字, {dictionary.word_count} 词")
    return dictionary


def resolve_dictionary(config) -> Dictionary:
    """按配置选择数据源：预编译词典存在则用之，否则读 CSV"""
    compiled: Optional[Path] = config.compiled_path
    if compiled is not None and compiled.is_file():
        return load_compiled_dictionary(compiled)
    if compiled is not None:
        logger.warning(f"预编译词典不存在，改用 CSV: {compiled}")
    return load_dictionary(config.chars_path, config.words_path)
