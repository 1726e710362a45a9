import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.country import Country, CountryList
from services import country_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/countries", tags=["countries"])

limiter = Limiter(key_func=get_remote_address)


@router.get("", response_model=CountryList)
@limiter.limit(settings.search_rate_limit)
async def list_countries(request: Request, search: str | None = None, region: str | None = None):
    try:
        criterion, notice = country_service.criterion_from_params(search, region)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    countries = await country_service.fetch_dataset()
    matches = country_service.filter_countries(countries, criterion)
    return CountryList(countries=matches, total=len(matches), criterion=criterion, notice=notice)


@router.get("/regions", response_model=list[str])
async def list_regions():
    countries = await country_service.fetch_dataset()
    return country_service.list_regions(countries)


@router.get("/{name}", response_model=Country)
async def get_country(name: str):
    countries = await country_service.fetch_dataset()
    country = country_service.find_by_name(countries, name)
    if not country:
        logger.info("Country lookup missed: %r", name)
        raise HTTPException(status_code=404, detail="Country not found")
    return country
