"""VAT number validation service: format, checksum and VIES existence checks."""
