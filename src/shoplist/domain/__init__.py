"""Domain package for shoplist."""
from .types import (
    UNITS,
    CATEGORIES,
    DEFAULT_UNIT,
    DEFAULT_CATEGORY,
    CATEGORY_LABELS_HE,
    ParsedItem,
    category_label,
)

__all__ = [
    'UNITS',
    'CATEGORIES',
    'DEFAULT_UNIT',
    'DEFAULT_CATEGORY',
    'CATEGORY_LABELS_HE',
    'ParsedItem',
    'category_label',
]
