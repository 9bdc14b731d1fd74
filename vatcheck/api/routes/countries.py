"""Country reference endpoints."""
from fastapi import APIRouter, HTTPException

from vatcheck.api.schemas.vat import CountryRead
from vatcheck.services.country_reference import get_country_name, is_eu_member
from vatcheck.services.vat_patterns import parse_country
from vatcheck.utils.vat import normalize_vat

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("/{code}", response_model=CountryRead)
def get_country(code: str) -> CountryRead:
    """Look up an ISO code or VAT prefix (EL, XI). 404 when unknown."""
    code = normalize_vat(code).strip()
    name = get_country_name(code)
    if name is None:
        raise HTTPException(status_code=404, detail="Unknown country code")
    return CountryRead(
        code=code,
        name=name,
        eu_member=is_eu_member(code),
        has_vat_format=parse_country(code) is not None,
    )
