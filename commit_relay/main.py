import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .github_client import GitHubClient
from .routes.commits import router as commits_router

logger = logging.getLogger("commit-relay")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.github = GitHubClient.from_settings(settings, transport=transport)
        logger.info(f"Relaying GitHub API at {settings.github_api_url}")
        yield
        await app.state.github.aclose()

    app = FastAPI(title="Commit Relay", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        return {"status": "ok", "app": "Commit Relay"}

    app.include_router(commits_router)
    return app


def run() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "commit_relay.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
