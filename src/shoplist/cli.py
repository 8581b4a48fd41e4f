"""Command line entry point: parse shopping text and print JSON."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from shoplist.domain.types import category_label
from shoplist.services.parser_service import TextItemParser
from shoplist.utils.logger import get_logger

LOG = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shoplist",
        description="Parse free-text shopping items into structured JSON.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default="-",
        help="Text to parse; '-' or omitted reads stdin",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Skip the remote model and use the local rules only",
    )
    parser.add_argument(
        "--labels",
        action="store_true",
        help="Add the Hebrew category label to every item",
    )
    return parser


def _read_text(arg: str) -> str:
    if arg == "-":
        return sys.stdin.read()
    return arg


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    text = _read_text(ns.text)
    if not text.strip():
        LOG.error("No text to parse. Pass it as an argument or on stdin.")
        return 2

    parser = TextItemParser(use_remote=False if ns.local else None)
    result = asyncio.run(parser.parse(text))

    payload = result.to_payload()
    if ns.labels:
        for item in payload["parsed"]:
            item["categoryLabel"] = category_label(item["category"])

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
