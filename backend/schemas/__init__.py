# Schemas package
from .common import ApiResponse, Pagination
from .health import HealthResponse
from .locations import LocationCreate, LocationResponse, LocationSearch, LocationUpdate, UserSummary

__all__ = [
    "ApiResponse",
    "HealthResponse",
    "LocationCreate",
    "LocationResponse",
    "LocationSearch",
    "LocationUpdate",
    "Pagination",
    "UserSummary",
]
