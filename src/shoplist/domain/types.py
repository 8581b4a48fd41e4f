"""Domain types for shoplist."""
from typing import Any, Annotated, Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Canonical units, stored in Hebrew as the shopping list displays them
UNITS: Tuple[str, ...] = (
    "יחידה",   # piece
    "ק״ג",     # kg
    "גרם",     # gram
    "ליטר",    # liter
    "מ״ל",     # ml
    "חבילה",   # package
    "בקבוק",   # bottle
    "קופסה",   # box
    "זוג",     # pair
)

CATEGORIES: Tuple[str, ...] = (
    "Dairy",
    "Meat",
    "Fish",
    "Produce",
    "Bakery",
    "Frozen",
    "Beverages",
    "Snacks",
    "Sweets",
    "Canned Goods",
    "Household",
    "Personal Care",
    "Grains",
)

DEFAULT_UNIT = "יחידה"
DEFAULT_CATEGORY = "Produce"

# Hebrew display labels for categories
CATEGORY_LABELS_HE: Dict[str, str] = {
    "Dairy": "מוצרי חלב",
    "Meat": "בשר",
    "Fish": "דגים",
    "Produce": "ירקות ופירות",
    "Bakery": "מאפים",
    "Frozen": "קפואים",
    "Beverages": "משקאות",
    "Snacks": "חטיפים",
    "Sweets": "ממתקים",
    "Canned Goods": "שימורים",
    "Household": "מוצרי בית",
    "Personal Care": "טיפוח אישי",
    "Grains": "דגנים",
}


def category_label(category: str) -> str:
    """Get the Hebrew display label for a category, or the category itself."""
    return CATEGORY_LABELS_HE.get(category, category)


class ParsedItem(BaseModel):
    """A structured shopping item produced from free text.

    The model only validates. Coercing raw candidates into range is the job
    of ``shoplist.parsing.normalize``.
    """
    name: Annotated[str, Field(min_length=1)]
    quantity: Annotated[float, Field(gt=0)] = 1.0
    unit: str = DEFAULT_UNIT
    category: str = DEFAULT_CATEGORY

    model_config = ConfigDict(frozen=True)

    @field_validator('name')
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        """Validate that name has visible text."""
        v = v.strip()
        if not v:
            raise ValueError('name cannot be empty')
        return v

    @field_validator('unit')
    @classmethod
    def unit_must_be_allowed(cls, v: str) -> str:
        if v not in UNITS:
            raise ValueError(f"unit must be one of: {', '.join(UNITS)}")
        return v

    @field_validator('category')
    @classmethod
    def category_must_be_allowed(cls, v: str) -> str:
        if v not in CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(CATEGORIES)}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-ready dict; whole quantities are rendered as int."""
        data = self.model_dump()
        if float(self.quantity).is_integer():
            data['quantity'] = int(self.quantity)
        return data
