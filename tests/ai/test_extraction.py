"""Tests for JSON extraction from model replies."""
import pytest

from shoplist.ai.errors import UnparsableResponseError
from shoplist.ai.extraction import extract_json_payload, find_json_text


def test_extract_plain_array():
    """A bare JSON array is decoded as is."""
    payload = extract_json_payload('[{"name": "חלב", "quantity": 2}]')
    assert payload == [{"name": "חלב", "quantity": 2}]


def test_extract_array_from_prose():
    """Text around the array is ignored."""
    reply = 'Sure! Here are the items:\n[{"name": "לחם"}, {"name": "ביצים"}]\nEnjoy.'
    assert [c["name"] for c in extract_json_payload(reply)] == ["לחם", "ביצים"]


def test_extract_array_from_code_fence():
    """Markdown code fences are skipped."""
    reply = '```json\n[{"name": "עגבניות", "unit": "ק״ג"}]\n```'
    assert extract_json_payload(reply) == [{"name": "עגבניות", "unit": "ק״ג"}]


def test_extract_single_object_is_wrapped():
    """A lone object becomes a one-element array."""
    reply = 'Result: {"name": "קולה", "quantity": 6, "unit": "בקבוק"}'
    assert find_json_text(reply) == '[{"name": "קולה", "quantity": 6, "unit": "בקבוק"}]'
    assert extract_json_payload(reply) == [{"name": "קולה", "quantity": 6, "unit": "בקבוק"}]


def test_extract_empty_array():
    """An empty array is returned, emptiness is the caller's concern."""
    assert extract_json_payload("[]") == []


@pytest.mark.parametrize("reply", [
    "I could not understand the request.",
    "[{'name': 'milk'}]",
    '[{"name": "חלב",]',
    "42",
    '"just a string"',
    "[" * 100000 + "]" * 100000,
])
def test_extract_unparsable(reply):
    """Replies without a decodable JSON array are errors."""
    with pytest.raises(UnparsableResponseError):
        extract_json_payload(reply)


def test_extract_error_keeps_json_text():
    """The failing text is kept for logging."""
    with pytest.raises(UnparsableResponseError) as exc_info:
        extract_json_payload("prefix [not json] suffix")
    assert exc_info.value.metadata["json_text"] == "[not json]"
