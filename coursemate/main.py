#!/usr/bin/env python
"""
CourseMate API: remaining-requirement checks and prerequisite graphs for
degree programs, plus GET /api/{course} served from the bundled
prerequisite fixture.
"""

import uvicorn
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from coursemate.academic.router import router as academic_router
from coursemate.prereq_api.router import router as prereq_router, load_prerequisite_table

from coursemate.catalog import CatalogStore, load_catalog
from coursemate.config import settings
from coursemate.prereq_api import PrerequisiteClient

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.catalog = CatalogStore()
    app.state.prerequisite_table = {}
    app.state.prereq_client = PrerequisiteClient(
        settings.prereq_api_url, timeout=settings.lookup_timeout
    )

    # Catalog and prerequisite fixture load independently
    try:
        app.state.catalog = load_catalog(settings.programs_dir)
        logger.info(f"Degree catalog loaded: {', '.join(app.state.catalog.names()) or 'no programs'}")
    except Exception as e:
        logger.error(f"Could not load degree catalog from {settings.programs_dir}: {e}", exc_info=True)

    try:
        app.state.prerequisite_table = load_prerequisite_table(settings.prerequisites_file)
        logger.info(f"Prerequisite fixture loaded ({len(app.state.prerequisite_table)} courses)")
    except (OSError, ValueError) as e:
        logger.error(f"Could not load prerequisite fixture {settings.prerequisites_file}: {e}")

    logger.info(f"Prerequisite lookups go to {settings.prereq_api_url}")
    yield
    app.state.prereq_client.close()


app = FastAPI(
    title="CourseMate API",
    description="Remaining degree requirements and prerequisite graphs for Computing Science programs.",
    version="1.0.0",
    lifespan=lifespan,
)

# Browser front ends on any origin call this API directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(academic_router)  # /academic
app.include_router(prereq_router)  # /api


@app.get("/", tags=["General"], summary="Health check")
async def read_root():
    return {"status": "OK", "programs_url": "/academic/programs"}


if __name__ == "__main__":
    uvicorn.run("coursemate.main:app", host=settings.host, port=settings.port, reload=True)
