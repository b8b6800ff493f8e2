# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that all parts
# of our Plant Care app can use, like settings, the database connection and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure and cross-cutting
# concerns used throughout the Plant Care application modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (pydantic-settings)
- Database infrastructure (SQLAlchemy async engine and sessions)
- Exception hierarchy
- Structured logging and time helpers
"""

__all__ = []
