#!/usr/bin/env python3
"""Run the API server."""

import uvicorn

from settings import API_HOST, API_PORT, LOG_LEVEL
from settings.logging import setup_logging

if __name__ == "__main__":
    setup_logging(level=LOG_LEVEL, to_file=True)
    uvicorn.run("web.api.app:create_app", factory=True, host=API_HOST, port=API_PORT)
