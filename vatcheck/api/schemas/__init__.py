"""API schemas."""
from vatcheck.api.schemas.vat import CountryRead, VatFormatRead, VatValidationRead

__all__ = ["CountryRead", "VatFormatRead", "VatValidationRead"]
