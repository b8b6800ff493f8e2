# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Describes version 1 of the plant care API: which sections exist (plants, tasks, calendar...)
# and where each one lives.
# 🧪 Purpose (Technical Summary):
# v1 metadata: route prefixes for the plant care routers, OpenAPI tag descriptions and the payload
# of the GET /api/v1/ info endpoint.
# 🔗 Dependencies:
# app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py (openapi_tags)

from typing import Any, Dict, List

from app.shared.config.settings import get_settings

__api_version__ = "v1"

ROUTE_PREFIXES = {
    "plants": "/plants",
    "tasks": "/tasks",
    "activities": "/activities",
    "calendar": "/calendar",
    "dashboard": "/dashboard",
}

API_TAGS: List[Dict[str, str]] = [
    {"name": "Plants", "description": "Plant collection, care status and watering"},
    {"name": "Tasks", "description": "Care task scheduling and completion"},
    {"name": "Activities", "description": "Activity log"},
    {"name": "Calendar", "description": "Month calendar of care tasks"},
    {"name": "Dashboard", "description": "Collection overview"},
    {"name": "Health Check", "description": "Liveness, readiness and system status"},
]


def get_api_info() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "app_version": settings.APP_VERSION,
        "api_version": __api_version__,
        "environment": settings.ENVIRONMENT,
        "features": [tag["name"].lower().replace(" ", "_") for tag in API_TAGS],
        "routes": dict(ROUTE_PREFIXES),
    }


__all__ = ["ROUTE_PREFIXES", "API_TAGS", "get_api_info"]
