#!/usr/bin/env python3
"""
Settings for the random user loader, read from .env and the environment.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# -----------------------------------------------------------------------------
# Load settings from .env (one directory above this file)
# -----------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")
# load_dotenv() does nothing if the file is missing, and never overrides variables
# that are already set in the real environment.

# ---------- Reading settings from environment variables --------------------------
# Every setting has a default, so the loader works without any .env file.

API_URL = os.environ.get("RANDOMUSER_API_URL", "https://randomuser.me/api/")
# Base URL of the RandomUser API. The ?results=<n> query string is added per request.

REQUEST_TIMEOUT = float(os.environ.get("RANDOMUSER_TIMEOUT", "15"))
# Seconds requests waits for the server before giving up with requests.Timeout.

PAGE_USER_LIMIT = int(os.environ.get("PAGE_USER_LIMIT", "100"))
# How many users the page asks for on every load.

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
