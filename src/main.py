"""ASGI entry point for the product catalog API."""

import logging

import uvicorn

from src.api import create_app
from src.config import get_config

config = get_config()
logging.basicConfig(level=config.logging.level)

app = create_app(config)


if __name__ == "__main__":
    uvicorn.run(app, host=config.server.host, port=config.server.port)
