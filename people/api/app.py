"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from people.config import config
from people.database import get_database

from .routes import people, schemas

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    count = await get_database().count_people()
    logger.info(f"Serving {count} people")
    yield


app = FastAPI(
    title="People Service API",
    description="Serves the roster of people as JSON for the people web client.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(schemas.router)
app.include_router(people.router)
