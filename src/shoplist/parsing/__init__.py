"""Local parsing: splitting, rule-based parsing and normalization."""
from .vocabulary import (
    UNIT_SYNONYMS,
    CATEGORY_KEYWORDS,
    ParserVocabulary,
    DEFAULT_VOCABULARY,
)
from .normalize import normalize, coerce_quantity
from .splitter import split_items
from .local_parser import parse_local

__all__ = [
    'UNIT_SYNONYMS',
    'CATEGORY_KEYWORDS',
    'ParserVocabulary',
    'DEFAULT_VOCABULARY',
    'normalize',
    'coerce_quantity',
    'split_items',
    'parse_local',
]
