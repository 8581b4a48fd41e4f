"""Prompt template for parsing free-text shopping items."""
import json
from typing import Dict, List, Tuple

from shoplist.parsing.vocabulary import ParserVocabulary, DEFAULT_VOCABULARY


ITEM_PARSING_INSTRUCTIONS = """Parse this shopping list text into a JSON array of item objects.
The text may describe one item or several items, in Hebrew, English or both.

Each object has these fields:
- name: the item name in Hebrew, without quantity or unit
- quantity: a number (default to 1 if not specified)
- unit: MUST be one of these exact values: {units} (default to {default_unit} if uncertain)
- category: MUST be one of these English categories: {categories}

You MUST map any non-standard unit to the closest standard unit from the list above.
{synonym_rules}

Splitting rules:
- Items on separate lines are separate items.
- Items separated by commas or semicolons on one line are separate items.
- Keep the items in the order they appear in the text.

Return ONLY the JSON array, even for a single item. No explanations."""

PROMPT_EXAMPLES: Tuple[Tuple[str, List[Dict[str, object]]], ...] = (
    ("חלב 2 ליטר", [
        {"name": "חלב", "quantity": 2, "unit": "ליטר", "category": "Dairy"},
    ]),
    ("5 תפוחים", [
        {"name": "תפוחים", "quantity": 5, "unit": "יחידה", "category": "Produce"},
    ]),
    ("שוקולד 3 חתיכות", [
        {"name": "שוקולד", "quantity": 3, "unit": "יחידה", "category": "Sweets"},
    ]),
    ("קולה 6 בקבוקים", [
        {"name": "קולה", "quantity": 6, "unit": "בקבוק", "category": "Beverages"},
    ]),
    ("עגבניות 3 ק״ג, לחם", [
        {"name": "עגבניות", "quantity": 3, "unit": "ק״ג", "category": "Produce"},
        {"name": "לחם", "quantity": 1, "unit": "יחידה", "category": "Bakery"},
    ]),
)


def format_synonym_rules(vocabulary: ParserVocabulary = DEFAULT_VOCABULARY) -> str:
    """Describe the Hebrew unit synonyms as mapping rules, one line per unit."""
    grouped: Dict[str, List[str]] = {}
    for token, unit in vocabulary.unit_synonyms:
        # English tokens and identity entries add nothing for the model
        if token == unit or token.isascii():
            continue
        grouped.setdefault(unit, []).append(f'"{token}"')

    return "\n".join(
        f'{", ".join(tokens)} should be mapped to "{unit}".'
        for unit, tokens in grouped.items()
    )


def format_examples() -> str:
    """Render the worked examples block of the prompt."""
    lines = ["For example:"]
    for text, items in PROMPT_EXAMPLES:
        output = json.dumps(items, ensure_ascii=False, separators=(",", ":"))
        lines.append(f'If input is "{text}", output: {output}')
    return "\n".join(lines)


def build_item_parsing_prompt(
    text: str,
    vocabulary: ParserVocabulary = DEFAULT_VOCABULARY
) -> str:
    """
    Build the full prompt for one parse request.

    Args:
        text: Raw user text
        vocabulary: Allow-lists the model must choose from

    Returns:
        Prompt text with the user input appended
    """
    instructions = ITEM_PARSING_INSTRUCTIONS.format(
        units=", ".join(vocabulary.units),
        default_unit=vocabulary.default_unit,
        categories=", ".join(vocabulary.categories),
        synonym_rules=format_synonym_rules(vocabulary)
    )
    return f'{instructions}\n\n{format_examples()}\n\nInput: "{text}"'
