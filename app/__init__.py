# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains our Plant Care Tracker code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (package discovery)

"""
Plant Care Tracker - personal plant collection and care schedule API

Keeps a collection of house plants, computes when each one needs watering,
organizes care tasks by due date and on a month calendar, and records
an activity log of everything done for the plants.
"""

__version__ = "1.0.0"
__title__ = "Plant Care Tracker API"
__description__ = "Plant collection, watering schedule and care task tracker"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
