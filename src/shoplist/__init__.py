"""Free-text shopping item parser."""
from shoplist.domain.types import ParsedItem, UNITS, CATEGORIES
from shoplist.parsing import normalize, split_items, parse_local
from shoplist.services.parser_service import TextItemParser, parse_item_text

__version__ = "0.1.0"

__all__ = [
    'ParsedItem',
    'UNITS',
    'CATEGORIES',
    'normalize',
    'split_items',
    'parse_local',
    'TextItemParser',
    'parse_item_text',
]
