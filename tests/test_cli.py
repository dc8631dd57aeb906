"""
命令行测试
"""

import io

import orjson
import pytest

from pinyin_translator import __version__
from pinyin_translator.cli import main


@pytest.fixture
def dicts_dir(tmp_path):
    (tmp_path / "chars.csv").write_text("阿,ā\n飞,fēi\n网,wáng\n名,mìng\n", encoding="utf-8")
    (tmp_path / "words.csv").write_text("网名,wǎng,míng\n", encoding="utf-8")
    return tmp_path


class TestTranslateCommand:

    def test_translate(self, capsys, dicts_dir):
        assert main(["translate", "网名阿飞!", "--dicts-dir", str(dicts_dir)]) == 0
        assert capsys.readouterr().out == "wǎngmíngāfēi!\n"

    def test_tokens_unmark(self, capsys, dicts_dir):
        assert main(["translate", "网名阿飞", "-t", "-u", "--dicts-dir", str(dicts_dir)]) == 0
        assert capsys.readouterr().out == "wang ming a fei\n"

    def test_json(self, capsys, dicts_dir):
        assert main(["translate", "网名", "--tokens", "--json", "--dicts-dir", str(dicts_dir)]) == 0
        payload = orjson.loads(capsys.readouterr().out)
        assert payload == {"text": "网名", "result": ["wǎng", "míng"]}

    def test_stdin(self, capsys, monkeypatch, dicts_dir):
        monkeypatch.setattr("sys.stdin", io.StringIO("阿飞\n"))
        assert main(["translate", "--dicts-dir", str(dicts_dir)]) == 0
        assert capsys.readouterr().out == "āfēi\n"

    def test_missing_dictionary(self, capsys, tmp_path):
        code = main(["translate", "阿飞", "--dicts-dir", str(tmp_path / "missing")])
        assert code == 2
        assert "词典错误" in capsys.readouterr().err


class TestOtherCommands:

    def test_build(self, capsys, tmp_path):
        out = tmp_path / "dict.json"
        assert main(["build", "--out", str(out)]) == 0
        assert capsys.readouterr().out.strip() == "4-一心一意"
        assert orjson.loads(out.read_bytes())["max_word_len"] == 4

    def test_build_custom_sources(self, capsys, dicts_dir, tmp_path):
        out = tmp_path / "out" / "dict.json"
        code = main([
            "build",
            "--chars", str(dicts_dir / "chars.csv"),
            "--words", str(dicts_dir / "words.csv"),
            "--out", str(out),
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == "2-网名"

    def test_demo(self, capsys):
        assert main(["demo"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("わたしわāfēi, and my English name is Rex Lee. wǎngmíngshìdúgūyǐng！")
        assert lines[2] == "xiamianshiyiduanduoyinfenciqiyiceshi，zhegerenwushangwuchouwei。"

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 1
