"""VAT number normalization helpers.

Normalization is deliberately minimal: ASCII upper-casing only. Separators and
spaces are left in place so that grammars which allow them (DK pair grouping)
keep deciding what is acceptable. Non-ASCII letters are never folded, so
"ı" or "ﬀ" cannot turn into a valid prefix.
"""
import string
from typing import Optional

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize_vat(raw: Optional[str]) -> str:
    """Upper-case the ASCII letters of a VAT number; None becomes an empty string."""
    if not raw:
        return ""
    return raw.translate(_ASCII_UPPER)


def split_vat(raw: Optional[str]) -> tuple[str, str]:
    """Split a VAT number into (country prefix, number body) after normalizing.

    Examples:
        >>> split_vat("nl123456782b01")
        ('NL', '123456782B01')
        >>> split_vat("B")
        ('B', '')
    """
    normalized = normalize_vat(raw)
    return normalized[:2], normalized[2:]


def is_ascii_digits(value: str) -> bool:
    """True when value is non-empty and made of 0-9 only."""
    return bool(value) and value.isascii() and value.isdigit()
