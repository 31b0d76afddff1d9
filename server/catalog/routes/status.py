from fastapi import APIRouter, Depends

from catalog.dependencies import get_gamesystem_service, get_videogame_service
from catalog.services.gamesystem import GameSystemService
from catalog.services.videogame import VideoGameService

router = APIRouter()

VERSION = "1.0.0"


@router.get("/status")
async def get_status(
    gamesystems: GameSystemService = Depends(get_gamesystem_service),
    videogames: VideoGameService = Depends(get_videogame_service),
):
    return {
        "status": "ok",
        "version": VERSION,
        "gamesystem_count": len(gamesystems.get_game_systems()),
        "videogame_count": len(videogames.get_video_games()),
    }
