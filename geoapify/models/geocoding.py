from typing import List, Optional

from pydantic import BaseModel, Field

from geoapify.models.common import Address


class GeocodingParsed(BaseModel):
    """Components the API recognised in a free-text query."""

    housenumber: Optional[str] = None
    street: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    expected_type: Optional[str] = None


class GeocodingQuery(BaseModel):
    text: Optional[str] = None
    parsed: Optional[GeocodingParsed] = None


class GeocodingResponse(BaseModel):
    results: List[Address] = Field(
        default_factory=list, description="Matches, best first."
    )
    query: Optional[GeocodingQuery] = None
