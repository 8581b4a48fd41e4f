"""Extract the JSON payload from a free-form model reply."""
import json
import re
from typing import Any, List

from .errors import UnparsableResponseError

# Greedy: from the first "[" to the last "]"
_ARRAY_PATTERN = re.compile(r"\[.*\]", re.DOTALL)
# Non-greedy: first complete flat object
_OBJECT_PATTERN = re.compile(r"\{.*?\}", re.DOTALL)


def find_json_text(response_text: str) -> str:
    """
    Locate the JSON-looking part of a reply.

    A single object is wrapped in brackets so callers always get an array.
    Without any match the trimmed reply is returned unchanged.
    """
    text = response_text.strip()

    array_match = _ARRAY_PATTERN.search(text)
    if array_match:
        return array_match.group(0)

    object_match = _OBJECT_PATTERN.search(text)
    if object_match:
        return f"[{object_match.group(0)}]"

    return text


def extract_json_payload(response_text: str) -> List[Any]:
    """
    Decode the item candidates from a model reply.

    Args:
        response_text: Raw reply text

    Returns:
        The decoded JSON array (possibly empty)

    Raises:
        UnparsableResponseError: If no JSON array can be decoded
    """
    json_text = find_json_text(response_text)
    try:
        payload = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise UnparsableResponseError(
            f"Reply is not valid JSON: {e.msg}",
            metadata={'json_text': json_text}
        ) from e
    except RecursionError as e:
        raise UnparsableResponseError(
            "Reply JSON is nested too deeply",
            metadata={'json_text': json_text}
        ) from e

    if not isinstance(payload, list):
        raise UnparsableResponseError(
            f"Expected a JSON array, got {type(payload).__name__}",
            metadata={'json_text': json_text}
        )
    return payload
