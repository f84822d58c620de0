# /bookstore/core/config.py

"""
Runtime configuration for the catalog service.

Values come from the process environment. A local `.env` file is loaded first
so development setups do not need to export anything.
"""

import os
from dotenv import load_dotenv

load_dotenv()

APP_TITLE = "Bookstore Catalog API"
APP_VERSION = "1.0.0"
APP_ENVIRONMENT = os.getenv("APP_ENVIRONMENT", "development")

# The second argument is the default used for local development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./bookstore.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None
