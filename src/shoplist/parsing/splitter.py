"""Split a free-text shopping list into per-item strings."""
import re
from typing import List

_LINE_BREAK = re.compile(r"\r?\n")
_INLINE_SEPARATOR = re.compile(r"[,;]")


def split_items(text: str) -> List[str]:
    """
    Split shopping list text into individual item texts.

    One item per line takes priority. A single line is split on commas and
    semicolons instead, which also splits a decimal comma like "1,5 kg".

    Args:
        text: The shopping list text

    Returns:
        Trimmed, non-blank item texts in input order
    """
    if not text or not text.strip():
        return []

    lines = [line.strip() for line in _LINE_BREAK.split(text) if line.strip()]
    if len(lines) > 1:
        return lines

    return [part.strip() for part in _INLINE_SEPARATOR.split(text) if part.strip()]
