"""
拼音翻译引擎

从右向左的最大匹配分词：
每次取未处理部分末尾最多 max_word_len 个字作为窗口，查不到就从窗口左侧
退回一个字再查，直到剩一个字；单字也查不到时原样输出。
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Tuple

from .dictionary import Dictionary
from .logging import get_engine_logger
from .text import prefix, substring, suffix
from .tones import strip_tones

logger = get_engine_logger()


class SegmentKind(Enum):
    RESOLVED = "resolved"            # 词典中查到的拼音
    PASS_THROUGH = "pass_through"    # 词典外的字符，原样输出


@dataclass(frozen=True)
class Segment:
    """一个源字符对应的输出片段"""
    kind: SegmentKind
    text: str

    @property
    def resolved(self) -> bool:
        return self.kind is SegmentKind.RESOLVED


class PinyinTranslator:
    """
    拼音翻译器

    示例:
        >>> pt = create_translator()
        >>> pt.translate("下面是一段多音分词歧义测试，这个人无伤无臭味。")
        'xiàmiànshìyīduànduōyīnfēncíqíyìcèshì，zhègèrénwúshāngwúchòuwèi。'

    构造完成后词典只读，同一实例可以在多个线程间共享。
    """

    def __init__(self, dictionary: Dictionary):
        if dictionary.max_word_len < 1:
            raise ValueError(f"max_word_len 必须为正整数: {dictionary.max_word_len}")

        self.dictionary = dictionary
        self.max_word_len = dictionary.max_word_len
        self._word_dict = self._merge(dictionary)

        logger.debug(
            f"翻译器就绪: {len(self._word_dict)} 条目, 最大词长 {self.max_word_len}"
        )

    @staticmethod
    def _merge(dictionary: Dictionary) -> MappingProxyType:
        """字表、词表合并为一张表，值统一为拼音元组"""
        merged: Dict[str, Tuple[str, ...]] = {
            key: (unit,) for key, unit in dictionary.chars.items()
        }
        merged.update(dictionary.words)
        return MappingProxyType(merged)

    def translate(self, content: str) -> str:
        """
        翻译为拼音

        "阿飞" → "āfēi"
        """
        return self._join(self.translate_raw(content))

    def translate_as_tokens(self, content: str) -> List[str]:
        """
        翻译为拼音列表，每个源字符一项

        "网名！" → ["wǎng", "míng", "！"]
        """
        return [seg.text for seg in self.translate_raw(content)]

    def unmark_translate(self, content: str) -> str:
        """翻译为无声调拼音: "阿飞" → "afei" """
        return self._join(self._unmark(self.translate_raw(content)))

    def unmark_translate_as_tokens(self, content: str) -> List[str]:
        """翻译为无声调拼音列表"""
        return [seg.text for seg in self._unmark(self.translate_raw(content))]

    @staticmethod
    def _join(segments: List[Segment]) -> str:
        return "".join(seg.text for seg in segments)

    @staticmethod
    def _unmark(segments: List[Segment]) -> List[Segment]:
        return [Segment(seg.kind, strip_tones(seg.text)) for seg in segments]

    def translate_raw(self, content: str) -> List[Segment]:
        """
        分词并查表，返回按原文顺序排列的片段列表

        Returns:
            每个源字符对应一个 Segment
        """
        if not content:
            return []

        # 从右向左解析，每个词的结果依次放到前面
        resolved: List[Tuple[Segment, ...]] = []
        unprocessed = content

        while unprocessed:
            width = min(self.max_word_len, len(unprocessed))
            window = suffix(unprocessed, width)
            unprocessed = prefix(unprocessed, len(unprocessed) - width)

            while len(window) > 1:
                units = self._word_dict.get(window)
                if units is not None:
                    resolved.append(self._segments(units))
                    window = ""
                    break
                # 窗口最左边的字退回未处理部分，右边界不变
                unprocessed += substring(window, 0, 1)
                window = substring(window, 1, len(window) - 1)

            if window:
                units = self._word_dict.get(window)
                if units is None:
                    resolved.append((Segment(SegmentKind.PASS_THROUGH, window),))
                else:
                    resolved.append(self._segments(units))

        resolved.reverse()
        return [seg for group in resolved for seg in group]

    @staticmethod
    def _segments(units: Tuple[str, ...]) -> Tuple[Segment, ...]:
        return tuple(Segment(SegmentKind.RESOLVED, unit) for unit in units)

    def __contains__(self, key: str) -> bool:
        return key in self._word_dict

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entries={len(self._word_dict)}, "
            f"max_word_len={self.max_word_len})"
        )
