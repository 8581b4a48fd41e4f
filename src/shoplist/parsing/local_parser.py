"""Rule-based parser for a single item, used when the remote model fails."""
import re
from typing import Optional, Tuple

from shoplist.domain.types import ParsedItem
from shoplist.utils.logger import get_logger
from .normalize import PLACEHOLDER_NAME, coerce_quantity
from .vocabulary import ParserVocabulary, DEFAULT_VOCABULARY

logger = get_logger(__name__)

_QUANTITY_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def _split_quantity(text: str) -> Tuple[Optional[float], str]:
    """Pull the first number out of the text and pick the name side of it."""
    match = _QUANTITY_PATTERN.search(text)
    if not match:
        return None, text

    before = text[:match.start()].strip()
    after = text[match.end():].strip()
    # A leading number ("5 apples") puts the name after it
    name = after if not before else before
    return float(match.group(0)), name


def match_unit(
    text: str,
    vocabulary: ParserVocabulary = DEFAULT_VOCABULARY
) -> Optional[Tuple[str, str]]:
    """Return the first (token, unit) synonym found in the text."""
    for token, unit in vocabulary.unit_synonyms:
        if token in text:
            return token, unit
    return None


def match_category(
    text: str,
    vocabulary: ParserVocabulary = DEFAULT_VOCABULARY
) -> Optional[str]:
    """Return the category of the first keyword found in the text."""
    lowered = text.lower()
    for keyword, category in vocabulary.category_keywords:
        if keyword in lowered:
            return category
    return None


def parse_local(
    item_text: str,
    vocabulary: ParserVocabulary = DEFAULT_VOCABULARY
) -> ParsedItem:
    """
    Parse a single item text without the remote model.

    Args:
        item_text: Text describing one item, e.g. "חלב 2 ליטר"
        vocabulary: Keyword tables and defaults

    Returns:
        Structured item data
    """
    logger.debug("Using local parser for item", text=item_text)
    text = item_text.strip()

    quantity, name = _split_quantity(text)

    unit = vocabulary.default_unit
    unit_match = match_unit(text, vocabulary)
    if unit_match:
        token, unit = unit_match
        name = name.replace(token, "", 1).strip()

    category = match_category(text, vocabulary) or vocabulary.default_category

    name = name.strip()
    if not name:
        name = text or PLACEHOLDER_NAME

    return ParsedItem(
        name=name,
        quantity=coerce_quantity(quantity),
        unit=unit,
        category=category
    )
