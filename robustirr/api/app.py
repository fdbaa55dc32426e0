"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from robustirr.api.routes import irr
from robustirr.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title=settings.api_title,
    description="Robust IRR for irregular, dated cash flows",
    version=settings.api_version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(irr.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
