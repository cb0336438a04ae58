"""Main entry point for the FastAPI server."""

import uvicorn

from people.api import app
from people.config import config
from people.logging_config import configure_logging

if __name__ == "__main__":
    configure_logging()
    uvicorn.run(app, host=config.get_host(), port=config.get_port())
