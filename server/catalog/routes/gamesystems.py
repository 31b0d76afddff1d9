"""Game system controller: maps service results onto HTTP responses."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from catalog.dependencies import get_gamesystem_service
from catalog.helpers.controller import build_error_log, build_error_response
from catalog.helpers.message import ErrorMessage, build_message
from catalog.models.gamesystem import GameSystemPayload
from catalog.services import gamesystem as gs_service

logger = logging.getLogger(__name__)

router = APIRouter()

MODULE_NAME = "GameSystemController"

GS_CT_ERR_GAMESYSTEM_NOT_FOUND = "GS_CT_ERR_GAMESYSTEM_NOT_FOUND"
GS_CT_DELETED_SUCCESSFULLY = "GS_CT_DELETED_SUCCESSFULLY"

# Service error codes that mean "no such id"; every other code is a conflict.
_NOT_FOUND_CODES = {
    gs_service.GS_SVC_ERR_UPDATE_GS_NOT_FOUND_BY_ID,
    gs_service.GS_SVC_ERR_DELETE_GS_NOT_FOUND_BY_ID,
}


def _error_result(error: ErrorMessage) -> JSONResponse:
    status_code = 404 if error.message in _NOT_FOUND_CODES else 409
    return JSONResponse(status_code=status_code, content=build_message(error.message))


def _unexpected(operation: str, err: Exception) -> JSONResponse:
    logger.error("%s.%s failed: %s", MODULE_NAME, operation, build_error_log(err))
    return JSONResponse(status_code=500, content=build_error_response(MODULE_NAME, operation))


@router.get("/gamesystems")
async def get_game_systems(request: Request):
    try:
        service = get_gamesystem_service(request)
        return [gs.to_dict() for gs in service.get_game_systems()]
    except Exception as e:
        return _unexpected("get_game_systems", e)


@router.get("/gamesystems/{gamesystem_id}")
async def get_game_system_by_id(gamesystem_id: str, request: Request):
    try:
        service = get_gamesystem_service(request)
        gamesystem = service.get_game_system_by_id(gamesystem_id)
        if gamesystem is None:
            return JSONResponse(
                status_code=404, content=build_message(GS_CT_ERR_GAMESYSTEM_NOT_FOUND)
            )
        return gamesystem.to_dict()
    except Exception as e:
        return _unexpected("get_game_system_by_id", e)


@router.post("/gamesystems", status_code=201)
async def create_game_system(payload: GameSystemPayload, request: Request):
    try:
        service = get_gamesystem_service(request)
        result = service.create_game_system(payload)
        if isinstance(result, ErrorMessage):
            return _error_result(result)
        return result.to_dict()
    except Exception as e:
        return _unexpected("create_game_system", e)


@router.put("/gamesystems/{gamesystem_id}")
async def update_game_system(gamesystem_id: str, payload: GameSystemPayload, request: Request):
    """Full replacement: fields left out of the body (such as ``image``) go back
    to their defaults. ``id`` in the body is ignored.
    """
    try:
        service = get_gamesystem_service(request)
        result = service.update_game_system(gamesystem_id, payload)
        if isinstance(result, ErrorMessage):
            return _error_result(result)
        return result.to_dict()
    except Exception as e:
        return _unexpected("update_game_system", e)


@router.delete("/gamesystems/{gamesystem_id}")
async def delete_game_system(gamesystem_id: str, request: Request):
    try:
        service = get_gamesystem_service(request)
        result = service.delete_game_system(gamesystem_id)
        if isinstance(result, ErrorMessage):
            return _error_result(result)
        return build_message(GS_CT_DELETED_SUCCESSFULLY)
    except Exception as e:
        return _unexpected("delete_game_system", e)
