from fastapi import APIRouter, Query

from leadengine.schemas.automation import CallWindowResponse, CityResponse
from leadengine.services.phone_locale import call_window_for, city_from_phone

router = APIRouter(prefix="/locale", tags=["Locale"])


@router.get("/city", response_model=CityResponse)
async def city_for_phone(phone: str = Query(..., min_length=1)) -> CityResponse:
    return CityResponse(phone=phone, city=city_from_phone(phone))


@router.get("/call-window", response_model=CallWindowResponse)
async def call_window(city: str = Query(...)) -> CallWindowResponse:
    return CallWindowResponse(city=city, call_window=call_window_for(city))
