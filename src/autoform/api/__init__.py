import os

from fastapi import APIRouter, FastAPI

from .routes import schema


def create_app(config_obj=None) -> FastAPI:
    from ..config import Config

    if config_obj is None:
        config_obj = Config.load(os.environ.get("CONFIG_FILE"))

    app = FastAPI(title="Autoform API")

    app.state.config = config_obj

    api_router = APIRouter(prefix="/api/v1")
    api_router.include_router(schema.router)
    app.include_router(api_router)

    return app
