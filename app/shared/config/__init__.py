# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell our Plant Care app how to connect to its database,
# which timezone to plan care in, and how to log.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the environment-driven Settings model.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Infrastructure components, presentation dependencies

from .settings import Settings, get_settings

__all__ = [
    "get_settings",
    "Settings",
]
