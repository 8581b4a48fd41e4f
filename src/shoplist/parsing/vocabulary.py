"""Unit and category keyword tables used by the local parser and the prompt.

Both tables are ordered: the first entry found in the text wins, so entries
must stay in the order they are declared here.
"""
from typing import Tuple
from pydantic import BaseModel, ConfigDict, model_validator

from shoplist.domain.types import (
    UNITS,
    CATEGORIES,
    DEFAULT_UNIT,
    DEFAULT_CATEGORY,
)


UNIT_SYNONYMS: Tuple[Tuple[str, str], ...] = (
    # Weight
    ("קילו", "ק״ג"),
    ("קילוגרם", "ק״ג"),
    ("ק״ג", "ק״ג"),
    ("קג", "ק״ג"),
    ("kg", "ק״ג"),
    ("גרם", "גרם"),
    ("gram", "גרם"),
    ("g", "גרם"),
    # Volume
    ("ליטר", "ליטר"),
    ("liter", "ליטר"),
    ("l", "ליטר"),
    ("מיליליטר", "מ״ל"),
    ("מ״ל", "מ״ל"),
    ("ml", "מ״ל"),
    # Package
    ("חבילה", "חבילה"),
    ("חבילות", "חבילה"),
    ("package", "חבילה"),
    ("pack", "חבילה"),
    ("חפיסה", "חבילה"),
    ("חפיסות", "חבילה"),
    # Bottle
    ("בקבוק", "בקבוק"),
    ("בקבוקים", "בקבוק"),
    ("bottle", "בקבוק"),
    ("bottles", "בקבוק"),
    # Box
    ("קופסה", "קופסה"),
    ("קופסאות", "קופסה"),
    ("box", "קופסה"),
    ("boxes", "קופסה"),
    # Pair
    ("זוג", "זוג"),
    ("זוגות", "זוג"),
    ("pair", "זוג"),
    ("pairs", "זוג"),
    # Piece
    ("יחידה", "יחידה"),
    ("יחידות", "יחידה"),
    ("חתיכה", "יחידה"),
    ("חתיכות", "יחידה"),
    ("פרוסה", "יחידה"),
    ("פרוסות", "יחידה"),
    ("פיסה", "יחידה"),
    ("פיסות", "יחידה"),
    ("piece", "יחידה"),
    ("pieces", "יחידה"),
    ("unit", "יחידה"),
    ("units", "יחידה"),
)

CATEGORY_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    # Dairy
    ("חלב", "Dairy"),
    ("גבינה", "Dairy"),
    ("יוגורט", "Dairy"),
    ("milk", "Dairy"),
    ("cheese", "Dairy"),
    ("yogurt", "Dairy"),
    # Meat
    ("בשר", "Meat"),
    ("עוף", "Meat"),
    ("הודו", "Meat"),
    ("beef", "Meat"),
    ("chicken", "Meat"),
    # Produce
    ("עגבנ", "Produce"),  # עגבניה, עגבניות
    ("מלפפון", "Produce"),
    ("תפוח", "Produce"),
    ("בננה", "Produce"),
    ("ירק", "Produce"),
    ("פרי", "Produce"),
    ("tomato", "Produce"),
    ("cucumber", "Produce"),
    ("apple", "Produce"),
    ("banana", "Produce"),
    # Grains and bakery
    ("אורז", "Grains"),
    ("פסטה", "Grains"),
    ("לחם", "Bakery"),
    ("rice", "Grains"),
    ("pasta", "Grains"),
    ("bread", "Bakery"),
    # Beverages
    ("מים", "Beverages"),
    ("משקה", "Beverages"),
    ("מיץ", "Beverages"),
    ("water", "Beverages"),
    ("juice", "Beverages"),
    ("drink", "Beverages"),
    # Sweets
    ("שוקולד", "Sweets"),
    ("ממתק", "Sweets"),
    ("chocolate", "Sweets"),
    ("candy", "Sweets"),
    # Eggs are shelved with dairy
    ("ביצים", "Dairy"),
    ("eggs", "Dairy"),
)


class ParserVocabulary(BaseModel):
    """Immutable bundle of allow-lists and keyword tables.

    Pass a custom instance to the parsing functions to swap tables without
    touching module state.
    """
    units: Tuple[str, ...] = UNITS
    categories: Tuple[str, ...] = CATEGORIES
    unit_synonyms: Tuple[Tuple[str, str], ...] = UNIT_SYNONYMS
    category_keywords: Tuple[Tuple[str, str], ...] = CATEGORY_KEYWORDS
    default_unit: str = DEFAULT_UNIT
    default_category: str = DEFAULT_CATEGORY

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def check_tables(self) -> 'ParserVocabulary':
        """Every table value must land inside the allow-lists."""
        unknown_units = set(self.units) - set(UNITS)
        if unknown_units:
            raise ValueError(f"Unknown units: {', '.join(sorted(unknown_units))}")

        unknown_categories = set(self.categories) - set(CATEGORIES)
        if unknown_categories:
            raise ValueError(f"Unknown categories: {', '.join(sorted(unknown_categories))}")

        if self.default_unit not in self.units:
            raise ValueError(f"Default unit '{self.default_unit}' is not an allowed unit")
        if self.default_category not in self.categories:
            raise ValueError(f"Default category '{self.default_category}' is not an allowed category")

        for token, unit in self.unit_synonyms:
            if not token:
                raise ValueError("Unit synonym cannot be empty")
            if unit not in self.units:
                raise ValueError(f"Synonym '{token}' maps to unknown unit '{unit}'")

        for keyword, category in self.category_keywords:
            if not keyword:
                raise ValueError("Category keyword cannot be empty")
            if category not in self.categories:
                raise ValueError(f"Keyword '{keyword}' maps to unknown category '{category}'")

        return self


DEFAULT_VOCABULARY = ParserVocabulary()
