"""
声调去除测试
"""
import unittest

from pinyin_translator import strip_tones, TONE_MARKS


class TestStripTones(unittest.TestCase):

    def test_table_size(self):
        self.assertEqual(len(TONE_MARKS), 24)
        self.assertEqual(set(TONE_MARKS.values()), {'a', 'o', 'e', 'i', 'u', 'ü'})

    def test_all_tones(self):
        self.assertEqual(strip_tones("āáǎà"), "aaaa")
        self.assertEqual(strip_tones("ōóǒò"), "oooo")
        self.assertEqual(strip_tones("ēéěè"), "eeee")
        self.assertEqual(strip_tones("īíǐì"), "iiii")
        self.assertEqual(strip_tones("ūúǔù"), "uuuu")
        self.assertEqual(strip_tones("ǖǘǚǜ"), "üüüü")

    def test_words(self):
        self.assertEqual(strip_tones("xiàmiàn"), "xiamian")
        self.assertEqual(strip_tones("nǚér"), "nüer")
        self.assertEqual(strip_tones("lǜsè"), "lüse")

    def test_untouched_characters(self):
        text = "Rex Lee, 网名！^_^ ü \x07"
        self.assertEqual(strip_tones(text), text)

    def test_idempotent(self):
        text = "zhōngguórén，wǒmen"
        once = strip_tones(text)
        self.assertEqual(strip_tones(once), once)
        self.assertEqual(len(once), len(text))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            TONE_MARKS['ā'] = 'x'


if __name__ == '__main__':
    unittest.main()
