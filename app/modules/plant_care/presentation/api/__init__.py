# 📄 File: app/modules/plant_care/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the plant care web endpoints.
# 🧪 Purpose (Technical Summary):
# API package for the plant care module (versioned routers and pydantic schemas).
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
