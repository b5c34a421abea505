"""FastAPI entry point for the job application form."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobform import __version__
from jobform.config import settings
from jobform.routers import form, ws

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting job application form on %s:%d", settings.host, settings.port)
    yield
    logger.info("Job application form stopped")


app = FastAPI(
    title="Job Application Form",
    description="Registration form with role-dependent fields and validation",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # localhost only; tighten in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(ws.router)
app.include_router(form.router)


@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "default_role": settings.default_role,
    }


def run() -> None:
    uvicorn.run(
        "jobform.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
