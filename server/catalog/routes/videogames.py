"""Video game controller: maps service results onto HTTP responses."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from catalog.dependencies import get_videogame_service
from catalog.helpers.controller import build_error_log, build_error_response
from catalog.helpers.message import ErrorMessage, build_message
from catalog.models.videogame import VideoGamePayload
from catalog.services import videogame as vg_service

logger = logging.getLogger(__name__)

router = APIRouter()

MODULE_NAME = "VideoGameController"

VG_CT_ERR_VIDEOGAME_NOT_FOUND = "VG_CT_ERR_VIDEOGAME_NOT_FOUND"
VG_CT_VIDEOGAME_DELETED_SUCCESSFULLY = "VG_CT_VIDEOGAME_DELETED_SUCCESSFULLY"

# Service error codes that mean "no such id"; every other code is a conflict.
_NOT_FOUND_CODES = {
    vg_service.VG_SVC_ERR_UPDATE_VG_VIDEOGAME_NOT_FOUND,
    vg_service.VG_SVC_ERR_DELETE_VG_VIDEOGAME_NOT_FOUND,
}


def _error_result(error: ErrorMessage) -> JSONResponse:
    status_code = 404 if error.message in _NOT_FOUND_CODES else 409
    return JSONResponse(status_code=status_code, content=build_message(error.message))


def _unexpected(operation: str, err: Exception) -> JSONResponse:
    logger.error("%s.%s failed: %s", MODULE_NAME, operation, build_error_log(err))
    return JSONResponse(status_code=500, content=build_error_response(MODULE_NAME, operation))


@router.get("/videogames")
async def get_video_games(request: Request):
    try:
        service = get_videogame_service(request)
        return [vg.to_dict() for vg in service.get_video_games()]
    except Exception as e:
        return _unexpected("get_video_games", e)


@router.get("/videogames/{videogame_id}")
async def get_video_game_by_id(videogame_id: str, request: Request):
    try:
        service = get_videogame_service(request)
        videogame = service.get_video_game_by_id(videogame_id)
        if videogame is None:
            return JSONResponse(
                status_code=404, content=build_message(VG_CT_ERR_VIDEOGAME_NOT_FOUND)
            )
        return videogame.to_dict()
    except Exception as e:
        return _unexpected("get_video_game_by_id", e)


@router.post("/videogames", status_code=201)
async def create_video_game(payload: VideoGamePayload, request: Request):
    try:
        service = get_videogame_service(request)
        result = service.create_video_game(payload)
        if isinstance(result, ErrorMessage):
            return _error_result(result)
        return result.to_dict()
    except Exception as e:
        return _unexpected("create_video_game", e)


@router.put("/videogames/{videogame_id}")
async def update_video_game(videogame_id: str, payload: VideoGamePayload, request: Request):
    """Full replacement: fields left out of the body (such as ``image``) go back
    to their defaults. ``id`` in the body is ignored.
    """
    try:
        service = get_videogame_service(request)
        result = service.update_video_game(videogame_id, payload)
        if isinstance(result, ErrorMessage):
            return _error_result(result)
        return result.to_dict()
    except Exception as e:
        return _unexpected("update_video_game", e)


@router.delete("/videogames/{videogame_id}")
async def delete_video_game(videogame_id: str, request: Request):
    try:
        service = get_videogame_service(request)
        result = service.delete_video_game(videogame_id)
        if isinstance(result, ErrorMessage):
            return _error_result(result)
        return build_message(VG_CT_VIDEOGAME_DELETED_SUCCESSFULLY)
    except Exception as e:
        return _unexpected("delete_video_game", e)
