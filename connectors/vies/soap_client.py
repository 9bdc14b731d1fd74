"""VIES checkVat SOAP client (plain requests + ElementTree, no WSDL toolkit)."""
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional
from xml.sax.saxutils import escape

import requests

from connectors.vies.exceptions import (
    ViesConnectionError,
    ViesResponseError,
    ViesServiceError,
)

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_URL = "https://ec.europa.eu/taxation_customs/vies/services/checkVatService"

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
VIES_TYPES_NS = "urn:ec.europa.eu:taxud:vies:services:checkVat:types"

_NS = {"soap": SOAP_ENV_NS, "vies": VIES_TYPES_NS}

# VIES returns "---" when a member state does not disclose trader details
_UNDISCLOSED = {"", "---"}

_ENVELOPE = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<soap:Envelope xmlns:soap="{env_ns}" xmlns:tns="{types_ns}">'
    "<soap:Body>"
    "<tns:checkVat>"
    "<tns:countryCode>{country_code}</tns:countryCode>"
    "<tns:vatNumber>{vat_number}</tns:vatNumber>"
    "</tns:checkVat>"
    "</soap:Body>"
    "</soap:Envelope>"
)


@dataclass(frozen=True)
class ViesCheckResult:
    """Parsed checkVatResponse."""

    country_code: str
    vat_number: str
    valid: bool
    request_date: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None


def build_check_vat_envelope(country_code: str, vat_number: str) -> str:
    """SOAP 1.1 request body for checkVat."""
    return _ENVELOPE.format(
        env_ns=SOAP_ENV_NS,
        types_ns=VIES_TYPES_NS,
        country_code=escape(country_code),
        vat_number=escape(vat_number),
    )


def _clean(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = " ".join(text.split())
    if text in _UNDISCLOSED:
        return None
    return text


def parse_check_vat_response(xml_text: str) -> ViesCheckResult:
    """
    Parse a checkVat SOAP response.
    Raises ViesServiceError on a SOAP fault, ViesResponseError on anything unreadable.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ViesResponseError(f"VIES returned malformed XML: {e}") from e

    fault = root.find(".//soap:Fault", _NS)
    if fault is not None:
        fault_code = fault.findtext("faultcode")
        fault_string = fault.findtext("faultstring") or ""
        raise ViesServiceError(fault_string, fault_code=fault_code)

    response = root.find(".//vies:checkVatResponse", _NS)
    if response is None:
        raise ViesResponseError("VIES response has no checkVatResponse element")

    valid_text = response.findtext("vies:valid", namespaces=_NS)
    if valid_text is None:
        raise ViesResponseError("VIES response has no valid flag")

    return ViesCheckResult(
        country_code=(response.findtext("vies:countryCode", namespaces=_NS) or "").strip(),
        vat_number=(response.findtext("vies:vatNumber", namespaces=_NS) or "").strip(),
        valid=valid_text.strip().lower() == "true",
        request_date=_clean(response.findtext("vies:requestDate", namespaces=_NS)),
        name=_clean(response.findtext("vies:name", namespaces=_NS)),
        address=_clean(response.findtext("vies:address", namespaces=_NS)),
    )


class ViesSoapClient:
    """
    Client for the European Commission VIES checkVat service.
    One HTTP POST per lookup; no caching, no retries.
    """

    def __init__(
        self,
        service_url: Optional[str] = None,
        timeout_seconds: int = 10,
    ):
        self.service_url = (service_url or DEFAULT_SERVICE_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds

    def check_vat_details(self, country_code: str, vat_number: str) -> ViesCheckResult:
        """Query VIES and return the full parsed record."""
        envelope = build_check_vat_envelope(country_code, vat_number)
        try:
            resp = requests.post(
                self.service_url,
                data=envelope.encode("utf-8"),
                headers={
                    "Content-Type": "text/xml; charset=utf-8",
                    "SOAPAction": "",
                },
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.warning("VIES request failed for %s: %s", country_code, e)
            raise ViesConnectionError(f"VIES request failed: {e}") from e

        # SOAP faults come back as HTTP 500 with a normal envelope
        if resp.status_code != 200 and resp.status_code != 500:
            raise ViesResponseError(
                f"VIES returned HTTP {resp.status_code}: {resp.text[:300]}"
            )

        try:
            result = parse_check_vat_response(resp.text)
        except ViesServiceError as e:
            logger.warning("VIES fault for %s: %s", country_code, e.fault_string)
            raise

        logger.info("VIES checkVat %s: valid=%s", country_code, result.valid)
        return result

    def check_vat(self, country_code: str, vat_number: str) -> bool:
        """True when VIES reports the number as issued and active."""
        return self.check_vat_details(country_code, vat_number).valid
