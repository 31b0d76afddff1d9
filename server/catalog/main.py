import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.config import settings
from catalog.middleware.access_log import AccessLogMiddleware
from catalog.models.gamesystem import GameSystemPayload
from catalog.models.videogame import VideoGamePayload
from catalog.repositories.memory import InMemoryRepository
from catalog.routes import gamesystems, status, videogames
from catalog.routes.status import VERSION
from catalog.services.gamesystem import GameSystemService
from catalog.services.seed import load_seed_file
from catalog.services.videogame import VideoGameService

logger = logging.getLogger(__name__)

REQUEST_VALIDATION_ERROR = "REQUEST_VALIDATION_ERROR"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.load_seed_data:
        count_gs = load_seed_file(
            settings.seed_dir / "gamesystems.json",
            GameSystemPayload,
            app.state.gamesystem_service.create_game_system,
        )
        count_vg = load_seed_file(
            settings.seed_dir / "videogames.json",
            VideoGamePayload,
            app.state.videogame_service.create_video_game,
        )
        logger.info("Loaded %d game systems and %d video games from %s", count_gs, count_vg, settings.seed_dir)
    yield


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "message": REQUEST_VALIDATION_ERROR,
            "errors": jsonable_encoder(exc.errors()),
        },
    )


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(title="Game Catalog API", version=VERSION, lifespan=lifespan)

    # Each app owns its storage
    app.state.gamesystem_service = GameSystemService(InMemoryRepository())
    app.state.videogame_service = VideoGameService(InMemoryRepository())

    app.add_middleware(AccessLogMiddleware)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(status.router)
    app.include_router(gamesystems.router)
    app.include_router(videogames.router)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)
