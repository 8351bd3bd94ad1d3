"""FastAPI application entry point."""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mortgage_calc.api.routes import amortization
from mortgage_calc.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Mortgage Calc",
    description="Annual-payment loan amortization schedules",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(amortization.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
