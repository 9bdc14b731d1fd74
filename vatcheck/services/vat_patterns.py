"""Per-country VAT number grammars.

Each pattern describes the number body only (everything after the 2-letter
prefix) and is matched against the whole body. Greece uses "EL", Northern
Ireland uses "XI" with the same grammar as GB.

Reference: https://ec.europa.eu/taxation_customs/vies/faq.html#item_11
"""
import enum
import re
from typing import Optional


class VatCountry(str, enum.Enum):
    """Country prefixes that carry a VAT number grammar."""

    AT = "AT"
    BE = "BE"
    BG = "BG"
    CY = "CY"
    CZ = "CZ"
    DE = "DE"
    DK = "DK"
    EE = "EE"
    EL = "EL"
    ES = "ES"
    FI = "FI"
    FR = "FR"
    GB = "GB"
    HR = "HR"
    HU = "HU"
    IE = "IE"
    IT = "IT"
    LT = "LT"
    LU = "LU"
    LV = "LV"
    MT = "MT"
    NL = "NL"
    PL = "PL"
    PT = "PT"
    RO = "RO"
    SE = "SE"
    SI = "SI"
    SK = "SK"
    XI = "XI"


_UK_PATTERN = r"(\d{9}|\d{12}|(GD|HA)\d{3})"

# Raw grammars, kept as strings for display and docs
VAT_PATTERNS: dict[VatCountry, str] = {
    VatCountry.AT: r"U[A-Z\d]{8}",
    VatCountry.BE: r"(0\d{9}|\d{10})",
    VatCountry.BG: r"\d{9,10}",
    VatCountry.CY: r"\d{8}[A-Z]",
    VatCountry.CZ: r"\d{8,10}",
    VatCountry.DE: r"\d{9}",
    VatCountry.DK: r"(\d{2} ?){3}\d{2}",
    VatCountry.EE: r"\d{9}",
    VatCountry.EL: r"\d{9}",
    VatCountry.ES: r"([A-Z]\d{7}[A-Z]|\d{8}[A-Z]|[A-Z]\d{8})",
    VatCountry.FI: r"\d{8}",
    VatCountry.FR: r"[A-Z\d]{2}\d{9}",
    VatCountry.GB: _UK_PATTERN,
    VatCountry.HR: r"\d{11}",
    VatCountry.HU: r"\d{8}",
    VatCountry.IE: r"([A-Z\d]{8}|[A-Z\d]{9})",
    VatCountry.IT: r"\d{11}",
    VatCountry.LT: r"(\d{9}|\d{12})",
    VatCountry.LU: r"\d{8}",
    VatCountry.LV: r"\d{11}",
    VatCountry.MT: r"\d{8}",
    VatCountry.NL: r"\d{9}B\d{2}",
    VatCountry.PL: r"\d{10}",
    VatCountry.PT: r"\d{9}",
    VatCountry.RO: r"\d{2,10}",
    VatCountry.SE: r"\d{12}",
    VatCountry.SI: r"\d{8}",
    VatCountry.SK: r"\d{10}",
    VatCountry.XI: _UK_PATTERN,
}

# \d must not match non-ASCII digits (e.g. Arabic-Indic)
_COMPILED: dict[VatCountry, re.Pattern[str]] = {
    country: re.compile(pattern, re.ASCII) for country, pattern in VAT_PATTERNS.items()
}


def parse_country(code: Optional[str]) -> Optional[VatCountry]:
    """Return the VatCountry for a 2-letter prefix, or None if it has no grammar."""
    if not code:
        return None
    try:
        return VatCountry(code)
    except ValueError:
        return None


def lookup_pattern(code: Optional[str]) -> Optional[re.Pattern[str]]:
    """Compiled number-body grammar for a country prefix (None when unknown)."""
    country = parse_country(code)
    if country is None:
        return None
    return _COMPILED[country]
