"""Video game business rules on top of a repository.

``gamesystem`` is stored as given. It is not checked against the game
system catalog.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from threading import Lock

from catalog.helpers.message import ErrorMessage, build_error_message
from catalog.models.videogame import VideoGame, VideoGamePayload
from catalog.repositories.base import Repository

logger = logging.getLogger(__name__)

VG_SVC_ERR_CREATE_VG_ALREADY_EXISTS_WITH_SAME_NAME = "VG_SVC_ERR_CREATE_VG_ALREADY_EXISTS_WITH_SAME_NAME"
VG_SVC_ERR_UPDATE_VG_ALREADY_EXISTS_WITH_SAME_NAME = "VG_SVC_ERR_UPDATE_VG_ALREADY_EXISTS_WITH_SAME_NAME"
VG_SVC_ERR_UPDATE_VG_VIDEOGAME_NOT_FOUND = "VG_SVC_ERR_UPDATE_VG_VIDEOGAME_NOT_FOUND"
VG_SVC_ERR_DELETE_VG_VIDEOGAME_NOT_FOUND = "VG_SVC_ERR_DELETE_VG_VIDEOGAME_NOT_FOUND"


class VideoGameService:
    def __init__(self, repository: Repository[VideoGame]) -> None:
        self._repo = repository
        # guards every check-then-write on the collection
        self._write_lock = Lock()

    def get_video_games(self) -> list[VideoGame]:
        return self._repo.list()

    def get_video_game_by_id(self, videogame_id: str) -> VideoGame | None:
        return self._repo.get(videogame_id)

    def create_video_game(self, payload: VideoGamePayload) -> VideoGame | ErrorMessage:
        with self._write_lock:
            if self._repo.find_by_name(payload.name) is not None:
                logger.warning("Video game %r already exists", payload.name)
                return build_error_message(VG_SVC_ERR_CREATE_VG_ALREADY_EXISTS_WITH_SAME_NAME)

            videogame = VideoGame(id=uuid.uuid4().hex, **payload.model_dump())
            self._repo.add(videogame)

        logger.info("Created video game %s (%s)", videogame.id, videogame.name)
        return videogame

    def update_video_game(
        self, videogame_id: str, payload: VideoGamePayload
    ) -> VideoGame | ErrorMessage:
        """Replace every mutable field; omitted optional fields reset to their defaults."""
        with self._write_lock:
            current = self._repo.get(videogame_id)
            if current is None:
                logger.warning("Video game %s not found for update", videogame_id)
                return build_error_message(VG_SVC_ERR_UPDATE_VG_VIDEOGAME_NOT_FOUND)

            same_name = self._repo.find_by_name(payload.name)
            if same_name is not None and same_name.id != videogame_id:
                logger.warning("Video game %r already exists", payload.name)
                return build_error_message(VG_SVC_ERR_UPDATE_VG_ALREADY_EXISTS_WITH_SAME_NAME)

            updated = replace(
                current,
                name=payload.name,
                developer=payload.developer,
                gamesystem=payload.gamesystem,
                genre=payload.genre,
                year=payload.year,
                image=payload.image,
            )
            self._repo.replace(updated)

        logger.info("Updated video game %s", videogame_id)
        return updated

    def delete_video_game(self, videogame_id: str) -> bool | ErrorMessage:
        with self._write_lock:
            removed = self._repo.remove(videogame_id)

        if not removed:
            logger.warning("Video game %s not found for delete", videogame_id)
            return build_error_message(VG_SVC_ERR_DELETE_VG_VIDEOGAME_NOT_FOUND)

        logger.info("Deleted video game %s", videogame_id)
        return True
