"""VAT validation endpoints.

GET /api/vat/BE0403199702/format     → grammar check only
GET /api/vat/BE0403199702?local=true → grammar + local checksum
GET /api/vat/BE0403199702            → grammar + VIES lookup
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from connectors.vies.exceptions import ViesError, ViesResponseError
from vatcheck.api.schemas.vat import VatFormatRead, VatValidationRead
from vatcheck.services.vat_validation import VatValidator
from vatcheck.utils.vat import normalize_vat, split_vat

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vat", tags=["vat"])


def get_validator() -> VatValidator:
    """Validator dependency (overridden in tests)."""
    return VatValidator()


@router.get("/{vat_number}/format", response_model=VatFormatRead)
def check_format(
    vat_number: str,
    validator: VatValidator = Depends(get_validator),
) -> VatFormatRead:
    """Structural check of the number body against its country grammar."""
    country, _ = split_vat(vat_number)
    return VatFormatRead(
        vat_number=normalize_vat(vat_number),
        country_code=country,
        valid=validator.validate_format(vat_number),
    )


@router.get("/{vat_number}", response_model=VatValidationRead)
def validate_vat_number(
    vat_number: str,
    local: bool = Query(False, description="Skip VIES and run the local checksum instead"),
    validator: VatValidator = Depends(get_validator),
) -> VatValidationRead:
    """Validate a VAT number locally or against VIES (default)."""
    country, _ = split_vat(vat_number)
    try:
        valid = validator.validate(vat_number, local=local)
    except ViesResponseError as e:
        logger.error("Unreadable VIES response for %s: %s", country, e)
        raise HTTPException(
            status_code=502,
            detail={"error": type(e).__name__, "message": str(e)},
        ) from e
    except ViesError as e:
        raise HTTPException(
            status_code=503,
            detail={"error": type(e).__name__, "message": str(e)},
        ) from e

    return VatValidationRead(
        vat_number=normalize_vat(vat_number),
        country_code=country,
        valid=valid,
        mode="local" if local else "remote",
    )
