# 📄 File: app/modules/plant_care/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant care module: everything about our plants, their watering schedules,
# the care tasks on the calendar and the history of what was done.
# 🧪 Purpose (Technical Summary):
# DDD module package (domain / infrastructure / presentation) exposing the care-schedule
# engine, the PlantCareService and the v1 HTTP routers.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (router registration), app.shared.infrastructure.database.connection (models)

"""
Plant Care Module

Layers:
- domain: Plant, CareTask and Activity entities, the care-schedule engine,
  repository interfaces and the PlantCareService
- infrastructure: SQLAlchemy models and repository implementations
- presentation: FastAPI routers, request/response schemas and dependencies
"""

__all__ = ["domain", "infrastructure", "presentation"]
