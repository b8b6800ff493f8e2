# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API version 1 requests, sending plant requests to
# the plant handlers, task requests to the task handlers and so on.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines the health router and the plant care module
# routers under their route prefixes.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.plant_care.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging

from fastapi import APIRouter

from app.modules.plant_care.presentation.api.v1 import (
    activities_router,
    calendar_router,
    dashboard_router,
    plants_router,
    tasks_router,
)

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# Include health check router (no prefix - direct access)
api_v1_router.include_router(
    health_router,
    tags=["Health Check"]
)


@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="Get API v1 version information and available endpoints",
                   tags=["API Info"])
async def api_v1_info() -> dict:
    """
    API v1 information endpoint

    Provides version details, route prefixes and documentation links.
    """
    return {
        **get_api_info(),
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc"
        },
    }


# =========================================================================
# MODULE ROUTER INCLUDES - PLANT CARE MODULE
# =========================================================================

for name, router, tag in [
    ("plants", plants_router, "Plants"),
    ("tasks", tasks_router, "Tasks"),
    ("activities", activities_router, "Activities"),
    ("calendar", calendar_router, "Calendar"),
    ("dashboard", dashboard_router, "Dashboard"),
]:
    api_v1_router.include_router(router, prefix=ROUTE_PREFIXES[name], tags=[tag])
    logger.debug(f"{tag} router loaded at {ROUTE_PREFIXES[name]}")
