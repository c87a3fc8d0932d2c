"""Serving-size string parsing."""

import re

_AMOUNT = r"(\d+(?:\.\d+)?)\s*(?:g|ml)\b"
_AMOUNT_PATTERN = re.compile(_AMOUNT, re.IGNORECASE)
_PAREN_PATTERN = re.compile(r"\(([^()]*)\)")
_NUMBER_ONLY_PATTERN = re.compile(r"^\d+(?:\.\d+)?$")


def parse_serving_grams(text: str | None) -> float | None:
    """Extract a gram amount from a free-form serving-size string.

    ``ml`` is treated as grams. A parenthesized amount such as the ``15g`` in
    ``"1 pod (15g)"`` wins over any other amount in the string.
    """
    if not text:
        return None
    cleaned = text.strip()

    for group in _PAREN_PATTERN.findall(cleaned):
        paren_match = _AMOUNT_PATTERN.search(group)
        if paren_match:
            return float(paren_match.group(1))

    amount_match = _AMOUNT_PATTERN.search(cleaned)
    if amount_match:
        return float(amount_match.group(1))

    # Open Food Facts sometimes stores just the weight.
    if _NUMBER_ONLY_PATTERN.match(cleaned):
        return float(cleaned)

    return None
