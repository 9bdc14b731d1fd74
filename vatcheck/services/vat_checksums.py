"""Local modulus checks for VAT numbers.

Every check receives the normalized, format-validated VAT number *including*
its 2-letter prefix and returns a plain bool. Only a handful of countries have
an implemented algorithm; ES, GB and XI are registered without one and are
treated exactly like countries with no entry (nothing to verify).
"""
import enum
import logging
from typing import Callable, Optional

from vatcheck.services.vat_patterns import VatCountry, parse_country
from vatcheck.utils.vat import is_ascii_digits, normalize_vat

logger = logging.getLogger(__name__)

ChecksumFn = Callable[[str], bool]

NL_MULTIPLIERS: tuple[int, ...] = (9, 8, 7, 6, 5, 4, 3, 2)


class ChecksumOutcome(str, enum.Enum):
    """Result of a local check. UNVERIFIED means no algorithm could run."""

    VALID = "valid"
    INVALID = "invalid"
    UNVERIFIED = "unverified"


def check_be(vat_number: str) -> bool:
    """Belgium: last 2 digits == 97 - (first 8 digits mod 97). Must start with BE0."""
    if not vat_number.startswith("BE0"):
        return False
    number_part, check_part = vat_number[2:10], vat_number[10:12]
    if not (is_ascii_digits(number_part) and is_ascii_digits(check_part)):
        return False
    return int(check_part) == 97 - (int(number_part) % 97)


def check_lu(vat_number: str) -> bool:
    """Luxembourg: last 2 digits == first 6 digits mod 89."""
    if not vat_number.startswith("LU"):
        return False
    number_part, check_part = vat_number[2:8], vat_number[8:10]
    if not (is_ascii_digits(number_part) and is_ascii_digits(check_part)):
        return False
    return int(check_part) == int(number_part) % 89


def check_fr(vat_number: str) -> bool:
    """France: 2 check digits == (SIREN * 100 + 12) mod 97.

    Older numbers carry letters in the check slot; those cannot be verified
    with this algorithm and are accepted.
    """
    if not vat_number.startswith("FR"):
        return False
    check_part = vat_number[2:4]
    if len(check_part) != 2 or not is_ascii_digits(check_part):
        return True
    number_part = vat_number[4:15]
    if not is_ascii_digits(number_part):
        return False
    return int(check_part) == (int(number_part) * 100 + 12) % 97


def check_de(vat_number: str) -> bool:
    """Germany: ISO 7064 MOD 11,10 over the first 8 digits, 9th digit is the check."""
    body = vat_number[2:11]
    if len(body) != 9 or not is_ascii_digits(body):
        return False

    product = 10
    for char in body[:8]:
        total = (int(char) + product) % 10
        if total == 0:
            total = 10
        product = (2 * total) % 11

    check = 11 - product
    if check == 10:
        check = 0
    return check == int(body[8])


def check_nl(vat_number: str) -> bool:
    """Netherlands: weighted sum (9..2) of digits 1-8 mod 11 equals digit 9; 10 counts as 0."""
    body = vat_number[2:11]
    if len(body) != 9 or not is_ascii_digits(body):
        return False

    total = sum(int(digit) * weight for digit, weight in zip(body, NL_MULTIPLIERS))
    remainder = total % 11
    if remainder > 9:
        remainder = 0
    return remainder == int(body[8])


# None = registered, no algorithm available
MODULUS_CHECKS: dict[VatCountry, Optional[ChecksumFn]] = {
    VatCountry.BE: check_be,
    VatCountry.LU: check_lu,
    VatCountry.DE: check_de,
    VatCountry.NL: check_nl,
    VatCountry.ES: None,
    VatCountry.FR: check_fr,
    VatCountry.GB: None,
    VatCountry.XI: None,
}


def get_modulus_check(country: Optional[VatCountry]) -> Optional[ChecksumFn]:
    """Checksum function for a country, or None when there is nothing to run."""
    if country is None:
        return None
    return MODULUS_CHECKS.get(country)


def check_modulus(vat_number: str) -> ChecksumOutcome:
    """Run the local check for a VAT number and report the three-way outcome."""
    normalized = normalize_vat(vat_number)
    country = parse_country(normalized[:2])
    check = get_modulus_check(country)
    if check is None:
        logger.debug("No modulus check for %s; accepting", normalized[:2])
        return ChecksumOutcome.UNVERIFIED
    outcome = ChecksumOutcome.VALID if check(normalized) else ChecksumOutcome.INVALID
    logger.debug("Modulus check %s for %s: %s", check.__name__, normalized[:2], outcome.value)
    return outcome


def validate_modulus(vat_number: str) -> bool:
    """Boolean form of check_modulus: only a failed algorithm is a rejection."""
    return check_modulus(vat_number) is not ChecksumOutcome.INVALID
