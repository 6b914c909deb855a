# api_server.py

import logging
from typing import Optional

from fastapi import FastAPI, Query

from randomusers.config import LOG_LEVEL
from randomusers.page import load

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Random User Page",
    description="Serves a page of users fetched from the RandomUser API.",
    version="0.1.0",
)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/")
def users_page(limit: Optional[int] = Query(None)):
    """
    Load the page data: {"users": [...]}.

    A plain def, so FastAPI runs it in its threadpool and the blocking HTTP call
    only holds up this one request. If the fetch fails the exception is left to
    FastAPI, which answers 500.
    """
    return load(limit)
