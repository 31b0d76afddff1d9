from fastapi import Request

from catalog.services.gamesystem import GameSystemService
from catalog.services.videogame import VideoGameService


def get_gamesystem_service(request: Request) -> GameSystemService:
    return request.app.state.gamesystem_service


def get_videogame_service(request: Request) -> VideoGameService:
    return request.app.state.videogame_service
