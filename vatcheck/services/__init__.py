"""VAT validation services."""
from vatcheck.services.vat_checksums import ChecksumOutcome, check_modulus, validate_modulus
from vatcheck.services.vat_patterns import VatCountry, lookup_pattern
from vatcheck.services.vat_validation import (
    VatValidator,
    validate_country_code,
    validate_format,
    validate_ip_address,
    validate_local,
)

__all__ = [
    "ChecksumOutcome",
    "VatCountry",
    "VatValidator",
    "check_modulus",
    "lookup_pattern",
    "validate_country_code",
    "validate_format",
    "validate_ip_address",
    "validate_local",
    "validate_modulus",
]
