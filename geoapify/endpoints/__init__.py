from .batch_geocoding import BatchForwardParams, BatchGeocodingService, BatchReverseParams
from .boundaries import BoundariesService, ConsistsOfParams, PartOfParams
from .geocoding import AutocompleteParams, GeocodingService, ReverseParams, SearchParams
from .ip_geolocation import IPGeolocationService
from .isolines import IsolineParams, IsolinesService
from .map_matching import MapMatchingParams, MapMatchingService, MapMatchingWaypoint
from .place_details import PlaceDetailsParams, PlaceDetailsService
from .places import PlacesParams, PlacesService
from .postcode import PostcodeParams, PostcodeService
from .route_matrix import Avoid, RouteMatrixParams, RouteMatrixService
from .route_planner import (
    PlannerAgent,
    PlannerBreak,
    PlannerJob,
    PlannerLocation,
    PlannerShipment,
    PlannerShipmentStop,
    RoutePlannerParams,
    RoutePlannerService,
)
from .routing import RoutingParams, RoutingService

__all__ = [
    "AutocompleteParams",
    "Avoid",
    "BatchForwardParams",
    "BatchGeocodingService",
    "BatchReverseParams",
    "BoundariesService",
    "ConsistsOfParams",
    "GeocodingService",
    "IPGeolocationService",
    "IsolineParams",
    "IsolinesService",
    "MapMatchingParams",
    "MapMatchingService",
    "MapMatchingWaypoint",
    "PartOfParams",
    "PlaceDetailsParams",
    "PlaceDetailsService",
    "PlacesParams",
    "PlacesService",
    "PlannerAgent",
    "PlannerBreak",
    "PlannerJob",
    "PlannerLocation",
    "PlannerShipment",
    "PlannerShipmentStop",
    "PostcodeParams",
    "PostcodeService",
    "ReverseParams",
    "RouteMatrixParams",
    "RouteMatrixService",
    "RoutePlannerParams",
    "RoutePlannerService",
    "RoutingParams",
    "RoutingService",
    "SearchParams",
]
