"""Tests for domain types."""
import pytest
from pydantic import ValidationError

from shoplist.domain.types import (
    CATEGORIES,
    CATEGORY_LABELS_HE,
    ParsedItem,
    category_label,
)


def test_parsed_item_defaults():
    item = ParsedItem(name="טופו")
    assert item.quantity == 1
    assert item.unit == "יחידה"
    assert item.category == "Produce"


def test_parsed_item_strips_name():
    assert ParsedItem(name="  חלב ").name == "חלב"


@pytest.mark.parametrize("kwargs", [
    {"name": ""},
    {"name": "   "},
    {"name": "חלב", "quantity": 0},
    {"name": "חלב", "quantity": -1},
    {"name": "חלב", "unit": "kg"},
    {"name": "חלב", "category": "Milk"},
])
def test_parsed_item_rejects_out_of_domain_values(kwargs):
    """The model validates; coercion is normalize's job."""
    with pytest.raises(ValidationError):
        ParsedItem(**kwargs)


def test_parsed_item_is_frozen():
    item = ParsedItem(name="חלב")
    with pytest.raises(ValidationError):
        item.quantity = 3


def test_to_dict_renders_whole_quantities_as_int():
    assert ParsedItem(name="חלב", quantity=2.0).to_dict()["quantity"] == 2
    assert isinstance(ParsedItem(name="חלב", quantity=2.0).to_dict()["quantity"], int)
    assert ParsedItem(name="גבינה", quantity=0.5).to_dict()["quantity"] == 0.5


def test_category_labels_cover_all_categories():
    assert set(CATEGORY_LABELS_HE) == set(CATEGORIES)
    assert category_label("Dairy") == "מוצרי חלב"
    assert category_label("Unknown") == "Unknown"
