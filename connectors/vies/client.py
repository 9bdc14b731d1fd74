"""Provider router for the VIES registry (SOAP service vs disabled)."""
import logging
from typing import Optional

from connectors.vies.exceptions import ViesNotConfiguredError
from connectors.vies.soap_client import ViesCheckResult, ViesSoapClient

logger = logging.getLogger(__name__)

# Lazy-initialized client (set by get_client())
_client: Optional[ViesSoapClient] = None


def get_client() -> ViesSoapClient:
    """Resolve the VIES client from config and cache it for the process."""
    global _client

    if _client is not None:
        return _client

    from vatcheck.core.config import settings

    mode = (getattr(settings, "vies_mode", None) or "soap").strip().lower()
    if mode == "off":
        raise ViesNotConfiguredError(
            "VIES_MODE=off: remote VAT validation is disabled. Use local validation instead."
        )

    _client = ViesSoapClient(
        service_url=settings.vies_service_url,
        timeout_seconds=settings.vies_timeout_seconds,
    )
    logger.info("VIES provider: soap (%s)", _client.service_url)
    return _client


def check_vat(country_code: str, vat_number: str) -> bool:
    """Existence check through the configured provider."""
    return get_client().check_vat(country_code, vat_number)


def check_vat_details(country_code: str, vat_number: str) -> ViesCheckResult:
    """Full VIES record through the configured provider."""
    return get_client().check_vat_details(country_code, vat_number)


def reset_client() -> None:
    """Reset cached client (for tests)."""
    global _client
    _client = None
