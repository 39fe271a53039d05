from typing import List, Optional

from pydantic import BaseModel


class IPLocationName(BaseModel):
    name: Optional[str] = None


class IPLocationLanguage(BaseModel):
    iso_code: Optional[str] = None
    name: Optional[str] = None
    name_native: Optional[str] = None


class IPLocationCountry(BaseModel):
    name: Optional[str] = None
    name_native: Optional[str] = None
    iso_code: Optional[str] = None
    phone_code: Optional[str] = None
    capital: Optional[str] = None
    flag: Optional[str] = None
    languages: List[IPLocationLanguage] = []
    currency: Optional[str] = None


class IPLocationContinent(BaseModel):
    name: Optional[str] = None
    code: Optional[str] = None


class IPLocationCoords(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class IPGeolocationResponse(BaseModel):
    ip: Optional[str] = None
    city: Optional[IPLocationName] = None
    state: Optional[IPLocationName] = None
    country: Optional[IPLocationCountry] = None
    continent: Optional[IPLocationContinent] = None
    location: Optional[IPLocationCoords] = None
