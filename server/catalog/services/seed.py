"""Initial catalog data loaded at startup from JSON files."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ValidationError

from catalog.helpers.message import ErrorMessage

logger = logging.getLogger(__name__)


def load_seed_file(
    path: Path,
    payload_cls: type[BaseModel],
    create: Callable[[BaseModel], object],
) -> int:
    """Create every entry of a JSON array through ``create``.

    Entries that fail validation or collide with an existing name are
    skipped. Returns the number of records created, 0 if the file is missing.
    """
    if not path.exists():
        return 0

    entries = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError(f"{path.name}: expected a JSON array")

    added = 0
    for entry in entries:
        try:
            payload = payload_cls.model_validate(entry)
        except ValidationError as e:
            logger.warning("Skipping invalid entry in %s: %s", path.name, e)
            continue

        result = create(payload)
        if isinstance(result, ErrorMessage):
            logger.warning("Skipping %r from %s: %s", payload.name, path.name, result.message)
            continue
        added += 1

    return added
