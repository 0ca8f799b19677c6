"""
Application settings

Read from the environment (and a local .env file if present).
"""

import os

from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "Question Paper Shuffler")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s  %(levelname)s  %(message)s")

# Comma-separated list; "*" allows any origin
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

# Paper header defaults used when a field is left blank
DEFAULT_EXAM_TYPE = os.getenv("DEFAULT_EXAM_TYPE", "INTERNAL EXAMINATION - I")
DEFAULT_DURATION = os.getenv("DEFAULT_DURATION", "3 Hrs")
DEFAULT_MAX_MARKS = os.getenv("DEFAULT_MAX_MARKS", "100")
