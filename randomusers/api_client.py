#!/usr/bin/env python3

# ------------------------------------------------------------------------------------------
# --------------------- HTTP client for the RandomUser API ----------------------------------
# ------------------------------------------------------------------------------------------
import logging
from typing import Any, Dict, List
import requests

from .config import API_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

User = Dict[str, Any]
# One user as the API sends it (name, location, login, picture, ...). We never look inside it.


def build_users_url(limit: int, base_url: str = API_URL) -> str:
    # The limit goes into the URL exactly as given. Zero or negative values are the API's problem.
    return f"{base_url}?results={limit}"


def fetch_users(limit: int, timeout: float = REQUEST_TIMEOUT, base_url: str = API_URL) -> List[User]:
    """
    Fetch `limit` random users and return the API's "results" list unchanged.

    Nothing is caught here: connection errors, HTTP error codes, a body that is
    not JSON, or a body without a "results" list all raise to the caller.
    """
    url = build_users_url(limit, base_url)

    resp = requests.get(url, timeout=timeout)
    # One GET, no custom headers. timeout stops us from hanging forever on a dead server.
    resp.raise_for_status()
    # 4xx/5xx raise requests.HTTPError here instead of trying to parse an error page.

    data = resp.json()  # requests.JSONDecodeError if the body is not JSON
    users = data["results"]  # KeyError if the API answered without a results field
    if not isinstance(users, list):
        raise TypeError(f"expected 'results' to be a list, got {type(users).__name__}")

    logger.debug("GET %s -> %s, %d users", url, resp.status_code, len(users))
    return users
