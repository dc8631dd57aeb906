"""
异常定义
"""


class PinyinTranslatorError(Exception):
    """所有异常的基类"""


class OutOfRangeError(PinyinTranslatorError, IndexError):
    """按字符切片越界（内部不变量被破坏）"""

    def __init__(self, text: str, start: int, length: int):
        self.text = text
        self.start = start
        self.length = length
        super().__init__(
            f"切片越界: start={start}, length={length}, 字符数={len(text)}"
        )


class DictionaryError(PinyinTranslatorError, ValueError):
    """词典数据格式错误或文件缺失"""

    def __init__(self, message: str, source: str = None, line_no: int = None):
        self.source = source
        self.line_no = line_no
        location = ""
        if source:
            location = f"{source}:{line_no}: " if line_no else f"{source}: "
        super().__init__(f"{location}{message}")
