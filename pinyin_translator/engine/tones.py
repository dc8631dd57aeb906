"""
声调符号处理
"""

from types import MappingProxyType


# 带调元音 → 无调元音
TONE_MARKS = MappingProxyType({
    'ā': 'a', 'á': 'a', 'ǎ': 'a', 'à': 'a',
    'ō': 'o', 'ó': 'o', 'ǒ': 'o', 'ò': 'o',
    'ē': 'e', 'é': 'e', 'ě': 'e', 'è': 'e',
    'ī': 'i', 'í': 'i', 'ǐ': 'i', 'ì': 'i',
    'ū': 'u', 'ú': 'u', 'ǔ': 'u', 'ù': 'u',
    'ǖ': 'ü', 'ǘ': 'ü', 'ǚ': 'ü', 'ǜ': 'ü',
})

_TONE_TABLE = str.maketrans(dict(TONE_MARKS))


def strip_tones(text: str) -> str:
    """
    去掉声调符号: xiàmiàn → xiamian, nǚ → nü

    整串一次替换，不改变长度，也不动非元音字符。
    """
    return text.translate(_TONE_TABLE)

