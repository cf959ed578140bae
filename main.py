# main.py
"""
Application entrypoint. Includes routers and mounts.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routers import rounds
from app.config.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="Group Rotation Backend")

# Basic CORS (adjust origins in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(rounds.router, prefix="/api/v1/rounds", tags=["rounds"])


@app.get("/")
async def index():
    """Health / basic info endpoint."""
    return {"status": "ok", "service": "group-rotation", "env": settings.ENV}
