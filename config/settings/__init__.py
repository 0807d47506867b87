"""
Settings package for the mindre.cash price comparison site.

DJANGO_ENV picks the module: "production" (hosted PostgreSQL, fails fast
without DB_NAME/DB_HOST), "test" (in-memory SQLite, fixed admin key) or
anything else for local development.
"""

import os

env = os.getenv("DJANGO_ENV", "development")

if env == "production":
    from .production import *
elif env == "test":
    from .test import *
else:
    from .development import *
