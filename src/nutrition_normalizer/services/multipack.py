"""Multi-pack product detection from product names."""

import re

_POD_TERMS = r"pods?|k[- ]?cups?|capsules?"
_MULTI_PACK_PATTERN = re.compile(
    r"\b(?:"
    + _POD_TERMS
    + r"|multi[- ]?packs?|variety\s+packs?|snack\s+packs?|single[- ]serve"
    r"|box\s+of|sachets|packets|pouches|bars"
    r"|\d+\s*-?\s*(?:packs?|pk|counts?|ct)"
    r"|packs?\s+of\s+\d+"
    r")\b",
    re.IGNORECASE,
)
_POD_PATTERN = re.compile(r"\b(?:" + _POD_TERMS + r"|single[- ]serve)\b", re.IGNORECASE)
_BAR_PATTERN = re.compile(r"\bbars?\b", re.IGNORECASE)
_PACKET_PATTERN = re.compile(r"\b(?:packets?|sachets?|pouch(?:es)?)\b", re.IGNORECASE)


def is_multi_pack(product_name: str | None) -> bool:
    """Return True when the name describes a package of several units."""
    if not product_name:
        return False
    return _MULTI_PACK_PATTERN.search(product_name) is not None


def is_pod_product(product_name: str | None) -> bool:
    """Return True for pod, capsule and K-Cup style products."""
    return bool(product_name) and _POD_PATTERN.search(product_name) is not None


def is_bar_product(product_name: str | None) -> bool:
    """Return True for bar-style products such as protein or granola bars."""
    return bool(product_name) and _BAR_PATTERN.search(product_name) is not None


def is_packet_product(product_name: str | None) -> bool:
    """Return True for packet, sachet and pouch products."""
    return bool(product_name) and _PACKET_PATTERN.search(product_name) is not None
