from .batch import BatchComplete, BatchJob, BatchPending, BatchResult
from .common import (
    Address,
    BoundaryType,
    Datasource,
    Feature,
    FeatureCollection,
    Format,
    Geometry,
    GeometryType,
    IsolineType,
    Location,
    LocationType,
    Rank,
    RouteDetail,
    RouteType,
    Timezone,
    TrafficModel,
    TravelMode,
    Units,
    circle_bias,
    circle_filter,
    country_bias,
    country_filter,
    lat_lon,
    lon_lat,
    place_filter,
    proximity_bias,
    rect_bias,
    rect_filter,
)
from .geocoding import GeocodingParsed, GeocodingQuery, GeocodingResponse
from .ip_geolocation import IPGeolocationResponse
from .planner import (
    PlannerAgentResult,
    PlannerRouteStep,
    RoutePlannerResponse,
)
from .routing import (
    LegStep,
    Route,
    RouteLeg,
    RouteMatrixEntry,
    RouteMatrixResponse,
    RouteMatrixWaypoint,
    RoutingResponse,
    StepInstruction,
)


__all__ = [
    "Address",
    "BoundaryType",
    "Datasource",
    "Feature",
    "FeatureCollection",
    "Format",
    "Geometry",
    "GeometryType",
    "IsolineType",
    "Location",
    "LocationType",
    "Rank",
    "RouteDetail",
    "RouteType",
    "Timezone",
    "TrafficModel",
    "TravelMode",
    "Units",
    "circle_bias",
    "circle_filter",
    "country_bias",
    "country_filter",
    "lat_lon",
    "lon_lat",
    "place_filter",
    "proximity_bias",
    "rect_bias",
    "rect_filter",
    "PlannerAgentResult",
    "PlannerRouteStep",
    "RoutePlannerResponse",
    "LegStep",
    "Route",
    "RouteLeg",
    "RouteMatrixEntry",
    "RouteMatrixResponse",
    "RouteMatrixWaypoint",
    "RoutingResponse",
    "StepInstruction",
    "BatchComplete",
    "BatchJob",
    "BatchPending",
    "BatchResult",
    "GeocodingParsed",
    "GeocodingQuery",
    "GeocodingResponse",
    "IPGeolocationResponse",
]
