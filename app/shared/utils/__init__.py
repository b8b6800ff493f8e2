# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a collection of helpful tools that other parts of the app
# can use for common tasks like logging and working with dates and times.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package: structured logging and timezone helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - time: UTC normalization and local calendar dates

# 🔄 Connected Modules / Calls From:
# Used by: All application modules for logging and time handling

from .logging import get_logger, log_context, setup_logging
from .time import ensure_aware, ensure_utc, local_date, utc_now

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
    "utc_now",
    "ensure_utc",
    "ensure_aware",
    "local_date",
]
