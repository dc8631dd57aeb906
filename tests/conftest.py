import pytest

from pinyin_translator import PinyinTranslator, build_dictionary


def _make_translator(chars=None, words=None):
    char_lines = [f"{k},{v}" for k, v in (chars or {}).items()]
    word_lines = [",".join([k, *v]) for k, v in (words or {}).items()]
    return PinyinTranslator(build_dictionary(char_lines, word_lines))


@pytest.fixture
def make_translator():
    """用内存中的字表/词表构建翻译器"""
    return _make_translator


@pytest.fixture
def small_translator():
    return _make_translator(
        chars={"阿": "ā", "飞": "fēi", "网": "wáng", "名": "mìng", "是": "shì", "我": "wǒ"},
        words={"网名": ["wǎng", "míng"]},
    )


@pytest.fixture(scope="session")
def bundled_translator():
    from pinyin_translator import create_translator
    return create_translator()
