#!/usr/bin/env python3
import time
import uvicorn
from fastapi import FastAPI

from realip.const import API_HOST, API_PORT
from realip.lib.config import Configuration, load_config
from realip.lib.middleware import RealIPMiddleware
from realip.models.generic import HealthCheck
from realip.routes import ip


def create_app(config: Configuration = None) -> FastAPI:
    if config is None:
        # Fails fast on an unsupported header or a bad trusted range
        config = load_config()

    app = FastAPI(swagger_ui_parameters={"syntaxHighlight.theme": "obsidian"})
    app.add_middleware(RealIPMiddleware, config=config)
    app.state.realip_config = config

    app.include_router(
        ip.router,
        prefix="/api/v1",
        tags=["Client IP"],
        dependencies=[],
    )

    @app.get(
        "/healthcheck",
        tags=["Status"],
        description="Simple service status check",
        response_model=HealthCheck,
        status_code=200,
    )
    def healthcheck():
        return {
            "timestamp": int(time.time()),
            "status": "ok",
            "config": config.summary(),
        }

    return app


if __name__ == "__main__":  # pragma: no cover
    uvicorn.run(
        "realip.main:create_app", host=API_HOST, port=API_PORT, reload=True, factory=True
    )
