"""
按字符（码位）计数的字符串切片工具

窗口偏移量一律是字符数，不是字节数。
"""

from .errors import OutOfRangeError


def char_count(text: str) -> int:
    """字符数"""
    return len(text)


def substring(text: str, start: int, length: int) -> str:
    """
    从第 start 个字符开始取 length 个字符

    Args:
        text: 源字符串
        start: 起始字符下标
        length: 字符个数

    Raises:
        OutOfRangeError: start + length 超出字符数
    """
    if start < 0 or length < 0 or start + length > len(text):
        raise OutOfRangeError(text, start, length)
    return text[start:start + length]


def suffix(text: str, length: int) -> str:
    """末尾 length 个字符"""
    return substring(text, len(text) - length, length)


def prefix(text: str, length: int) -> str:
    """开头 length 个字符"""
    return substring(text, 0, length)
