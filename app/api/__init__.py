# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The front door of the Plant Care Tracker: everything a phone or web app can call lives under here.
# 🧪 Purpose (Technical Summary):
# HTTP layer package: cross-cutting middleware and the versioned /api/v1 router.
# 🔗 Dependencies:
# FastAPI, Starlette
# 🔄 Connected Modules / Calls From:
# app.main.py

"""
Layout:
    middleware/   request IDs, error envelope, request logging
    v1/           router aggregation, API info and health endpoints
"""
