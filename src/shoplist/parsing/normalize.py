"""Coerce raw item candidates into valid ParsedItem values."""
import math
from typing import Any, Mapping

from shoplist.domain.types import ParsedItem
from shoplist.utils.logger import get_logger
from .vocabulary import ParserVocabulary, DEFAULT_VOCABULARY

logger = get_logger(__name__)

# Last resort when both the candidate name and the fallback are blank
PLACEHOLDER_NAME = "פריט"


def coerce_quantity(value: Any) -> float:
    """Turn any raw quantity into a positive float, defaulting to 1."""
    if value is None or isinstance(value, bool):
        return 1.0

    if isinstance(value, (int, float)):
        try:
            quantity = float(value)
        except OverflowError:
            return 1.0
    elif isinstance(value, str):
        try:
            quantity = float(value.strip())
        except ValueError:
            return 1.0
    else:
        return 1.0

    if not math.isfinite(quantity) or quantity <= 0:
        return 1.0
    return quantity


def normalize(
    candidate: Any,
    fallback_name: str = "",
    vocabulary: ParserVocabulary = DEFAULT_VOCABULARY
) -> ParsedItem:
    """
    Apply defaults and allow-list checks to a raw candidate.

    Never raises: anything out of range is replaced by its default.

    Args:
        candidate: Raw item, usually a dict decoded from model output
        fallback_name: Name to use when the candidate has none
            (the original input text)
        vocabulary: Allow-lists and defaults to validate against

    Returns:
        A valid ParsedItem
    """
    if not isinstance(candidate, Mapping):
        candidate = {'name': candidate}

    quantity = coerce_quantity(candidate.get('quantity'))

    unit = candidate.get('unit')
    if not isinstance(unit, str) or unit not in vocabulary.units:
        logger.debug(
            f"Unit '{unit}' not in allowed list, defaulting to '{vocabulary.default_unit}'"
        )
        unit = vocabulary.default_unit

    category = candidate.get('category')
    if not isinstance(category, str) or category not in vocabulary.categories:
        logger.debug(
            f"Category '{category}' not in allowed list, defaulting to '{vocabulary.default_category}'"
        )
        category = vocabulary.default_category

    raw_name = candidate.get('name')
    name = str(raw_name).strip() if raw_name is not None else ""
    if not name:
        name = (fallback_name or "").strip() or PLACEHOLDER_NAME

    return ParsedItem(
        name=name,
        quantity=quantity,
        unit=unit,
        category=category
    )
