"""
pinyin-translator 命令行工具
"""

import argparse
import sys

import orjson

# 演示用例：混合了日文、英文、表情和多音字歧义
DEMO_TEXT = "わたしわ阿飞, and my English name is Rex Lee. 网名是独孤影！ ^_^。下面是一段多音分词歧义测试，这个人无伤无臭味。"
DEMO_UNMARK_TEXT = "下面是一段多音分词歧义测试，这个人无伤无臭味。"


def _read_text(args) -> str:
    if args.text is not None:
        return args.text
    return sys.stdin.read().rstrip("\n")


def _cmd_translate(args) -> int:
    from pinyin_translator import create_translator, TranslatorConfig

    config = TranslatorConfig.from_env()
    if args.dicts_dir:
        config.dicts_dir = args.dicts_dir
    translator = create_translator(config)

    text = _read_text(args)
    if args.tokens:
        if args.unmark:
            result = translator.unmark_translate_as_tokens(text)
        else:
            result = translator.translate_as_tokens(text)
    elif args.unmark:
        result = translator.unmark_translate(text)
    else:
        result = translator.translate(text)

    if args.json:
        payload = {"text": text, "result": result}
        sys.stdout.write(orjson.dumps(payload).decode("utf-8") + "\n")
    elif args.tokens:
        print(" ".join(result))
    else:
        print(result)
    return 0


def _cmd_build(args) -> int:
    from pinyin_translator import compile_dictionary, TranslatorConfig

    config = TranslatorConfig()
    chars = args.chars or config.chars_path
    words = args.words or config.words_path
    dictionary = compile_dictionary(chars, words, args.out)
    # 输出: 最大词长-最长词
    print(f"{dictionary.max_word_len}-{dictionary.longest_word}")
    return 0


def _cmd_demo(args) -> int:
    from pinyin_translator import create_translator

    translator = create_translator()
    print(translator.translate(DEMO_TEXT))
    print(translator.translate_as_tokens(DEMO_TEXT))
    print(translator.unmark_translate(DEMO_UNMARK_TEXT))
    return 0


def _cmd_server(args) -> int:
    import os
    from pinyin_translator.api.server import main as server_main

    os.environ["HOST"] = args.host
    os.environ["PORT"] = str(args.port)
    server_main()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pinyin-translator",
        description="汉字转拼音（词典最大匹配分词）",
    )

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # translate 命令
    translate_parser = subparsers.add_parser("translate", help="翻译文本为拼音")
    translate_parser.add_argument("text", nargs="?", help="待翻译文本（缺省时读取标准输入）")
    translate_parser.add_argument("-t", "--tokens", action="store_true", help="按字输出拼音列表")
    translate_parser.add_argument("-u", "--unmark", action="store_true", help="去掉声调")
    translate_parser.add_argument("--json", action="store_true", help="JSON 输出")
    translate_parser.add_argument("--dicts-dir", default=None, help="词典目录")

    # build 命令
    compile_parser = subparsers.add_parser("build", help="编译 CSV 词典为 JSON")
    compile_parser.add_argument("--chars", default=None, help="字表 CSV (默认: 自带 chars.csv)")
    compile_parser.add_argument("--words", default=None, help="词表 CSV (默认: 自带 words.csv)")
    compile_parser.add_argument("--out", required=True, help="输出 JSON 路径")

    # demo 命令
    subparsers.add_parser("demo", help="运行示例")

    # server 命令
    server_parser = subparsers.add_parser("server", help="启动 API 服务")
    server_parser.add_argument("--host", default="0.0.0.0", help="绑定地址 (默认: 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=3000, help="端口 (默认: 3000)")

    # version 命令
    subparsers.add_parser("version", help="显示版本")

    return parser


def main(argv=None) -> int:
    """命令行入口"""
    from pinyin_translator.engine.errors import DictionaryError

    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "translate": _cmd_translate,
        "build": _cmd_build,
        "demo": _cmd_demo,
        "server": _cmd_server,
    }

    if args.command == "version":
        from pinyin_translator import __version__
        print(f"pinyin-translator v{__version__}")
        return 0

    if args.command not in commands:
        parser.print_help()
        return 1

    try:
        return commands[args.command](args)
    except DictionaryError as e:
        print(f"词典错误: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
