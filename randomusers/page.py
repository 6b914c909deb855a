#!/usr/bin/env python3
"""
Page-load hook: fetch the users the page shows.
"""

from typing import Dict, List, Optional

from .api_client import User, fetch_users
from .config import PAGE_USER_LIMIT


def load(limit: Optional[int] = None) -> Dict[str, List[User]]:
    """
    Called by the server before rendering the page.

    Returns {"users": [...]} for the template. Errors from fetch_users are left
    to the server's own error handling.
    """
    if limit is None:
        limit = PAGE_USER_LIMIT
    return {"users": fetch_users(limit)}
