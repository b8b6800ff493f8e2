# 📄 File: app/modules/plant_care/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the plant care web endpoints, kept together so later versions can live side by side.
#
# 🧪 Purpose (Technical Summary):
# API version 1 routers for plants, tasks, activities, calendar and dashboard.
#
# 🔗 Dependencies:
# - FastAPI APIRouter
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

"""
Plant Care API Version 1

- Plants API (/plants): collection CRUD, care status, water now
- Tasks API (/tasks): care task CRUD, grouping, completion
- Activities API (/activities): activity log
- Calendar API (/calendar): month grid with tasks
- Dashboard API (/dashboard): overview counters
"""

from .activities import activities_router
from .plants import plants_router
from .schedule import calendar_router, dashboard_router
from .tasks import tasks_router

__all__ = [
    "activities_router",
    "plants_router",
    "calendar_router",
    "dashboard_router",
    "tasks_router",
]
