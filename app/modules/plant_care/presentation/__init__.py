# 📄 File: app/modules/plant_care/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The doors into the plant care module from the web.
# 🧪 Purpose (Technical Summary):
# Presentation layer package: FastAPI routers, schemas and dependency providers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
