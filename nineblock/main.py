"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nineblock import __version__
from nineblock.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.nineblock_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="nineblock",
        description="Nine-block identicons rendered from 32-bit codes",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["ETag"],
    )

    from nineblock.api.router import api_router

    app.include_router(api_router)

    logger.info("nineblock %s ready (%s)", __version__, settings.nineblock_env)
    return app


app = create_app()
