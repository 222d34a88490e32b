"""
FastAPI application entry point.

Run:  uvicorn app.main:app --reload --port 8000
"""
from __future__ import annotations

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
)

from fastapi import FastAPI

from services.format_service import FormattingService
from app.routes import router, init_service

app = FastAPI(title="SFC Formatter")

init_service(FormattingService())

# API routes
app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok"}
