from __future__ import annotations

import argparse
import json
import sys

from rich.console import Console
from rich.table import Table

from .config import EngineConfig
from .engine import CaseEngine
from .errors import CaseKitError
from .logger import logger
from .styles import iter_styles, render
from .tokens import tokenize

SAMPLE_TEXT = "hello world example"


def _engine() -> CaseEngine:
    return CaseEngine(EngineConfig.from_env())


def _inputs(args) -> list[str]:
    if args.text:
        return list(args.text)
    logger.debug("No text arguments; reading lines from stdin")
    return [line.rstrip("\r\n") for line in sys.stdin]


def cmd_convert(args):
    engine = _engine()
    logger.debug("Converting with style=%s policy=%s", args.style, engine.null_policy.value)
    rows = [{"input": text, "output": engine.convert(text, args.style)} for text in _inputs(args)]
    if args.json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return
    for row in rows:
        print(row["output"])


def cmd_tokens(args):
    engine = _engine()
    for text in _inputs(args):
        print(json.dumps(engine.tokenize(text), ensure_ascii=False))


def cmd_styles(args):
    table = Table(title="Case styles")
    table.add_column("name")
    table.add_column("joiner")
    table.add_column("sample")
    table.add_column("description")
    words = tokenize(SAMPLE_TEXT)
    for name, style in iter_styles():
        table.add_row(name, repr(style.joiner), render(words, style), style.description)
    Console().print(table)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="casekit",
        description="Convert identifiers and phrases between naming conventions",
    )
    sub = p.add_subparsers(dest="cmd", required=True)
    p_c = sub.add_parser("convert", help="Render text in a naming convention")
    p_c.add_argument("--style", "-s", default="kebab", help="Target style name (default: kebab)")
    p_c.add_argument("--json", action="store_true", help="Print input/output pairs as JSON")
    p_c.add_argument("text", nargs="*", help="Strings to convert; stdin lines when omitted")
    p_c.set_defaults(func=cmd_convert)
    p_t = sub.add_parser("tokens", help="Show the word tokens of each input")
    p_t.add_argument("text", nargs="*")
    p_t.set_defaults(func=cmd_tokens)
    p_s = sub.add_parser("styles", help="List registered styles")
    p_s.set_defaults(func=cmd_styles)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except CaseKitError as exc:
        logger.error("%s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
