"""VAT validation schemas."""
from typing import Literal, Optional

from pydantic import BaseModel


class VatFormatRead(BaseModel):
    """Result of a grammar-only check."""

    vat_number: str
    country_code: str
    valid: bool


class VatValidationRead(VatFormatRead):
    """Result of a local or remote validation."""

    mode: Literal["local", "remote"]


class CountryRead(BaseModel):
    """Country reference entry."""

    code: str
    name: Optional[str] = None
    eu_member: bool
    has_vat_format: bool
