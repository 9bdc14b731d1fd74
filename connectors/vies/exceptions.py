"""Exceptions for the VIES (EU VAT Information Exchange System) connector."""
from typing import Optional

# VIES faults that clear up on their own; worth retrying later
RETRYABLE_FAULTS = frozenset(
    {
        "MS_UNAVAILABLE",
        "TIMEOUT",
        "SERVICE_UNAVAILABLE",
        "MS_MAX_CONCURRENT_REQ",
        "GLOBAL_MAX_CONCURRENT_REQ",
        "SERVER_BUSY",
    }
)


class ViesError(Exception):
    """Base class for every VIES failure."""

    pass


class ViesConnectionError(ViesError):
    """Raised when the VIES endpoint cannot be reached (DNS, TLS, timeout)."""

    pass


class ViesServiceError(ViesError):
    """Raised when VIES answers with a SOAP fault (e.g. INVALID_INPUT, MS_UNAVAILABLE)."""

    def __init__(self, fault_string: str, fault_code: Optional[str] = None):
        self.fault_string = (fault_string or "").strip()
        self.fault_code = fault_code
        super().__init__(f"VIES fault: {self.fault_string or 'unknown'}")

    @property
    def is_retryable(self) -> bool:
        return self.fault_string.upper() in RETRYABLE_FAULTS


class ViesResponseError(ViesError):
    """Raised when the VIES response cannot be parsed or lacks the valid flag."""

    pass


class ViesNotConfiguredError(ViesError):
    """Raised when remote validation is requested but VIES_MODE=off."""

    pass
