"""Module: main."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dogiguard.api.v1.api import api_router
from dogiguard.core.config import settings
from dogiguard.db.init_db import init_db

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="DogiGuard API", version="0.1.0")

app.include_router(api_router, prefix="/api/v1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Alembic owns the production schema; this keeps local SQLite databases usable without a migration run.
init_db()
