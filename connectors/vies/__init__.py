"""VIES connector: existence checks against the EU VAT registry."""
from connectors.vies.client import check_vat, check_vat_details, get_client, reset_client
from connectors.vies.exceptions import (
    ViesConnectionError,
    ViesError,
    ViesNotConfiguredError,
    ViesResponseError,
    ViesServiceError,
)
from connectors.vies.soap_client import ViesCheckResult, ViesSoapClient

__all__ = [
    "check_vat",
    "check_vat_details",
    "get_client",
    "reset_client",
    "ViesCheckResult",
    "ViesSoapClient",
    "ViesError",
    "ViesConnectionError",
    "ViesServiceError",
    "ViesResponseError",
    "ViesNotConfiguredError",
]
