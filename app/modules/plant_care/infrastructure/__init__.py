# 📄 File: app/modules/plant_care/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where the plant care module actually talks to the database.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package for SQLAlchemy persistence of plant care entities.
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# app.modules.plant_care.presentation.dependencies
