# 📄 File: app/modules/plant_care/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The brains of plant care: the watering calculator and the service that ties it to storage.
# 🧪 Purpose (Technical Summary):
# Domain services package: the pure care-schedule engine and the async PlantCareService.
# 🔗 Dependencies:
# Domain models, repository interfaces
# 🔄 Connected Modules / Calls From:
# app.modules.plant_care.presentation.dependencies, API routers
