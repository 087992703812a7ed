"""
Entry point for the Monthcast Forecasting API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    application = FastAPI(
        title="Monthcast Forecasting Engine",
        description="Trend, seasonality and blended forecasts for monthly business metrics.",
        version="1.0.0",
    )
    application.include_router(router, prefix="/api/v1")
    log.info(
        "forecast engine configured (solver=%s, season_length=%d, max_degree=%d)",
        settings.trend_solver, settings.season_length, settings.max_trend_degree,
    )
    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
