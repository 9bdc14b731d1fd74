"""VAT number validation: format, local modulus and VIES existence checks.

    validate_format("NL123456782B01")          -> grammar only
    validate_local("NL123456782B01")           -> grammar + checksum (no network)
    VatValidator().validate_remote(...)         -> grammar + VIES lookup
    VatValidator().validate(vat, local=True)    -> pick one of the two above

Invalid input is a False result, never an exception. Registry failures
(connectors.vies.exceptions.ViesError) propagate to the caller untouched.
"""
import ipaddress
import logging
from typing import Optional, Protocol

from vatcheck.services.country_reference import is_known_country
from vatcheck.services.vat_checksums import validate_modulus
from vatcheck.services.vat_patterns import lookup_pattern
from vatcheck.utils.vat import normalize_vat, split_vat

logger = logging.getLogger(__name__)

# RFC 1918 and IPv6 unique-local. Loopback, link-local and reserved are public here.
PRIVATE_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("fc00::/7"),
)


class RegistryClient(Protocol):
    """Anything that can confirm a VAT number was actually issued."""

    def check_vat(self, country_code: str, vat_number: str) -> bool: ...


def validate_format(vat_number: Optional[str]) -> bool:
    """Check the number body against its country grammar. Says nothing about issuance."""
    if not vat_number:
        return False

    country, number = split_vat(vat_number)
    pattern = lookup_pattern(country)
    if pattern is None:
        logger.debug("Unknown VAT prefix %r", country)
        return False

    return pattern.fullmatch(number) is not None


def validate_local(vat_number: Optional[str]) -> bool:
    """Format check followed by the country's modulus check, if it has one."""
    return validate_format(vat_number) and validate_modulus(normalize_vat(vat_number))


def validate_country_code(country_code: str) -> bool:
    """ISO 3166-1 alpha-2 membership test."""
    return is_known_country(country_code)


def validate_ip_address(ip_address: str) -> bool:
    """True for a syntactically valid IPv4/IPv6 address outside the private ranges."""
    if not ip_address:
        return False
    try:
        address = ipaddress.ip_address(ip_address)
    except ValueError:
        return False
    return not any(
        address.version == network.version and address in network
        for network in PRIVATE_NETWORKS
    )


class VatValidator:
    """
    Entry point for VAT validation.
    The registry defaults to the configured VIES client, resolved on first remote call.
    """

    def __init__(self, registry: Optional[RegistryClient] = None):
        self._registry = registry

    @property
    def registry(self) -> RegistryClient:
        if self._registry is None:
            from connectors.vies.client import get_client

            self._registry = get_client()
        return self._registry

    def validate_format(self, vat_number: Optional[str]) -> bool:
        return validate_format(vat_number)

    def validate_local(self, vat_number: Optional[str]) -> bool:
        return validate_local(vat_number)

    def validate_remote(self, vat_number: Optional[str]) -> bool:
        """Format gate, then ask the registry. Registry errors are not caught here."""
        if not validate_format(vat_number):
            return False
        country, number = split_vat(vat_number)
        return self.registry.check_vat(country, number)

    def validate(self, vat_number: Optional[str], local: bool = False) -> bool:
        """Local (format + checksum) or remote (format + registry) validation."""
        if local:
            return self.validate_local(vat_number)
        return self.validate_remote(vat_number)
