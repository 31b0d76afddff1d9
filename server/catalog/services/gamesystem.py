"""Game system business rules on top of a repository.

Expected failures (unknown id, duplicate name) come back as
:class:`~catalog.helpers.message.ErrorMessage` values. Only unexpected
problems raise.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from threading import Lock

from catalog.helpers.message import ErrorMessage, build_error_message
from catalog.models.gamesystem import GameSystem, GameSystemPayload
from catalog.repositories.base import Repository

logger = logging.getLogger(__name__)

GS_SVC_ERR_CREATE_GS_ALREADY_EXISTS_WITH_SAME_NAME = "GS_SVC_ERR_CREATE_GS_ALREADY_EXISTS_WITH_SAME_NAME"
GS_SVC_ERR_UPDATE_GS_ALREADY_EXISTS_WITH_SAME_NAME = "GS_SVC_ERR_UPDATE_GS_ALREADY_EXISTS_WITH_SAME_NAME"
GS_SVC_ERR_UPDATE_GS_NOT_FOUND_BY_ID = "GS_SVC_ERR_UPDATE_GS_NOT_FOUND_BY_ID"
GS_SVC_ERR_DELETE_GS_NOT_FOUND_BY_ID = "GS_SVC_ERR_DELETE_GS_NOT_FOUND_BY_ID"


class GameSystemService:
    def __init__(self, repository: Repository[GameSystem]) -> None:
        self._repo = repository
        # guards every check-then-write on the collection
        self._write_lock = Lock()

    def get_game_systems(self) -> list[GameSystem]:
        return self._repo.list()

    def get_game_system_by_id(self, gamesystem_id: str) -> GameSystem | None:
        return self._repo.get(gamesystem_id)

    def create_game_system(self, payload: GameSystemPayload) -> GameSystem | ErrorMessage:
        with self._write_lock:
            if self._repo.find_by_name(payload.name) is not None:
                logger.warning("Game system %r already exists", payload.name)
                return build_error_message(GS_SVC_ERR_CREATE_GS_ALREADY_EXISTS_WITH_SAME_NAME)

            gamesystem = GameSystem(
                id=uuid.uuid4().hex,
                name=payload.name,
                description=payload.description,
                image=payload.image,
            )
            self._repo.add(gamesystem)

        logger.info("Created game system %s (%s)", gamesystem.id, gamesystem.name)
        return gamesystem

    def update_game_system(
        self, gamesystem_id: str, payload: GameSystemPayload
    ) -> GameSystem | ErrorMessage:
        """Replace every mutable field; omitted optional fields reset to their defaults."""
        with self._write_lock:
            current = self._repo.get(gamesystem_id)
            if current is None:
                logger.warning("Game system %s not found for update", gamesystem_id)
                return build_error_message(GS_SVC_ERR_UPDATE_GS_NOT_FOUND_BY_ID)

            same_name = self._repo.find_by_name(payload.name)
            if same_name is not None and same_name.id != gamesystem_id:
                logger.warning("Game system %r already exists", payload.name)
                return build_error_message(GS_SVC_ERR_UPDATE_GS_ALREADY_EXISTS_WITH_SAME_NAME)

            updated = replace(
                current,
                name=payload.name,
                description=payload.description,
                image=payload.image,
            )
            self._repo.replace(updated)

        logger.info("Updated game system %s", gamesystem_id)
        return updated

    def delete_game_system(self, gamesystem_id: str) -> bool | ErrorMessage:
        with self._write_lock:
            removed = self._repo.remove(gamesystem_id)

        if not removed:
            logger.warning("Game system %s not found for delete", gamesystem_id)
            return build_error_message(GS_SVC_ERR_DELETE_GS_NOT_FOUND_BY_ID)

        logger.info("Deleted game system %s", gamesystem_id)
        return True
