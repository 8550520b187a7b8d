from contextlib import asynccontextmanager
from fastapi import FastAPI

from otp_validator.infrastructure.redis_cache.pool import close_redis, get_redis
from otp_validator.logging import setup_logging
from otp_validator.presentation.api import api
from otp_validator.settings import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup: the client connects lazily on the first command
    get_redis()
    try:
        yield
    finally:
        # shutdown
        await close_redis()


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title="OTP Validation API", version="0.1.0", lifespan=lifespan)
    app.include_router(api)
    return app


app = create_app()
