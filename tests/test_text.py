"""
按字符切片测试
"""
import unittest

from pinyin_translator.engine.text import substring, char_count, prefix, suffix
from pinyin_translator.engine.errors import OutOfRangeError, PinyinTranslatorError


class TestSubstring(unittest.TestCase):

    def test_ascii(self):
        self.assertEqual(substring("hello", 1, 3), "ell")

    def test_counts_characters_not_bytes(self):
        text = "わた阿飞ab"
        self.assertEqual(char_count(text), 6)
        self.assertEqual(substring(text, 2, 2), "阿飞")
        self.assertEqual(substring(text, 4, 2), "ab")

    def test_astral_plane(self):
        """表情符号按一个字符计"""
        text = "a😀阿"
        self.assertEqual(char_count(text), 3)
        self.assertEqual(substring(text, 1, 1), "😀")

    def test_empty_span(self):
        self.assertEqual(substring("阿飞", 2, 0), "")
        self.assertEqual(substring("", 0, 0), "")

    def test_out_of_range(self):
        with self.assertRaises(OutOfRangeError):
            substring("阿飞", 1, 2)
        with self.assertRaises(OutOfRangeError):
            substring("阿飞", -1, 1)
        with self.assertRaises(OutOfRangeError):
            substring("阿飞", 0, -1)

    def test_out_of_range_is_index_error(self):
        with self.assertRaises(IndexError):
            substring("", 0, 1)
        with self.assertRaises(PinyinTranslatorError):
            substring("", 0, 1)

    def test_prefix_suffix(self):
        self.assertEqual(prefix("网名是独孤影", 2), "网名")
        self.assertEqual(suffix("网名是独孤影", 3), "独孤影")
        self.assertEqual(suffix("网名", 0), "")


if __name__ == '__main__':
    unittest.main()
