from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class Format(str, Enum):
    JSON = "json"
    GEOJSON = "geojson"
    XML = "xml"


class LocationType(str, Enum):
    COUNTRY = "country"
    STATE = "state"
    CITY = "city"
    POSTCODE = "postcode"
    STREET = "street"
    AMENITY = "amenity"
    LOCALITY = "locality"


class TravelMode(str, Enum):
    DRIVE = "drive"
    LIGHT_TRUCK = "light_truck"
    MEDIUM_TRUCK = "medium_truck"
    TRUCK = "truck"
    HEAVY_TRUCK = "heavy_truck"
    TRUCK_DANGEROUS_GOODS = "truck_dangerous_goods"
    LONG_TRUCK = "long_truck"
    BUS = "bus"
    SCOOTER = "scooter"
    MOTORCYCLE = "motorcycle"
    BICYCLE = "bicycle"
    MOUNTAIN_BIKE = "mountain_bike"
    ROAD_BIKE = "road_bike"
    WALK = "walk"
    HIKE = "hike"
    TRANSIT = "transit"
    APPROXIMATED_TRANSIT = "approximated_transit"


class RouteType(str, Enum):
    BALANCED = "balanced"
    SHORT = "short"
    LESS_MANEUVERS = "less_maneuvers"


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class TrafficModel(str, Enum):
    FREE_FLOW = "free_flow"
    APPROXIMATED = "approximated"


class RouteDetail(str, Enum):
    INSTRUCTIONS = "instruction_details"
    ROUTE = "route_details"
    ELEVATION = "elevation"


class IsolineType(str, Enum):
    TIME = "time"
    DISTANCE = "distance"


class BoundaryType(str, Enum):
    ADMINISTRATIVE = "administrative"
    POSTAL_CODE = "postal_code"
    POLITICAL = "political"
    LOW_EMISSION_ZONE = "low_emission_zone"


class GeometryType(str, Enum):
    POINT = "point"
    GEOMETRY_1000 = "geometry_1000"
    GEOMETRY_5000 = "geometry_5000"
    GEOMETRY_10000 = "geometry_10000"


class Location(NamedTuple):
    lat: float
    lon: float

    def lon_lat(self) -> List[float]:
        """GeoJSON order, as the POST endpoints expect it."""
        return [self.lon, self.lat]


def lat_lon(lat: float, lon: float) -> Location:
    return Location(lat, lon)


def lon_lat(lon: float, lat: float) -> Location:
    return Location(lat, lon)


# === Filters and biases =======================================================


def country_filter(*codes: str) -> str:
    return "countrycode:" + ",".join(codes)


def circle_filter(lon: float, lat: float, radius_meters: float) -> str:
    return "circle:%f,%f,%f" % (lon, lat, radius_meters)


def rect_filter(lon1: float, lat1: float, lon2: float, lat2: float) -> str:
    return "rect:%f,%f,%f,%f" % (lon1, lat1, lon2, lat2)


def place_filter(place_id: str) -> str:
    return "place:" + place_id


def proximity_bias(lon: float, lat: float) -> str:
    return "proximity:%f,%f" % (lon, lat)


circle_bias = circle_filter
rect_bias = rect_filter
country_bias = country_filter


# === Response models ==========================================================


class Rank(BaseModel):
    importance: Optional[float] = None
    popularity: Optional[float] = None
    confidence: Optional[float] = None
    confidence_city_level: Optional[float] = None
    confidence_street_level: Optional[float] = None
    confidence_building_level: Optional[float] = None
    match_type: Optional[str] = None


class Timezone(BaseModel):
    name: Optional[str] = None
    name_alt: Optional[str] = None
    offset_STD: Optional[str] = None
    offset_STD_seconds: Optional[int] = None
    offset_DST: Optional[str] = None
    offset_DST_seconds: Optional[int] = None
    abbreviation_STD: Optional[str] = None
    abbreviation_DST: Optional[str] = None


class Datasource(BaseModel):
    sourcename: Optional[str] = None
    attribution: Optional[str] = None
    license: Optional[str] = None
    url: Optional[str] = None


class Address(BaseModel):
    """A single geocoded address."""

    lat: float = 0.0
    lon: float = 0.0
    name: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    state: Optional[str] = None
    state_code: Optional[str] = None
    county: Optional[str] = None
    county_code: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None
    housenumber: Optional[str] = None
    suburb: Optional[str] = None
    district: Optional[str] = None
    formatted: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    result_type: Optional[str] = None
    distance: Optional[float] = None
    place_id: Optional[str] = None
    category: Optional[str] = None
    rank: Optional[Rank] = None
    timezone: Optional[Timezone] = None
    datasource: Optional[Datasource] = None


class Geometry(BaseModel):
    type: str
    coordinates: Any = Field(
        None, description="Nested coordinate arrays; shape depends on `type`."
    )


class Feature(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "Feature"
    geometry: Optional[Geometry] = None
    properties: Dict[str, Any] = Field(default_factory=dict)


class FeatureCollection(BaseModel):
    """GeoJSON FeatureCollection; unknown top-level members are kept."""

    model_config = ConfigDict(extra="allow")

    type: str = "FeatureCollection"
    features: List[Feature] = Field(default_factory=list)
    properties: Optional[Dict[str, Any]] = None
