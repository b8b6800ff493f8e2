# 📄 File: app/modules/plant_care/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules of plant care, free of any web or database details.
# 🧪 Purpose (Technical Summary):
# Domain layer package: entities, value objects, repository contracts and services.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Infrastructure repositories, presentation routers
