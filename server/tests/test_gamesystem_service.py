import threading
import time

import pytest

from catalog.helpers.message import ErrorMessage
from catalog.models.gamesystem import GameSystemPayload
from catalog.repositories.memory import InMemoryRepository
from catalog.services import gamesystem as gs_service
from catalog.services.gamesystem import GameSystemService


@pytest.fixture()
def service():
    return GameSystemService(InMemoryRepository())


def _payload(name: str = "Sega Master System", **overrides) -> GameSystemPayload:
    data = {"name": name, "description": "A Sega 8 bits console", "image": "ms.png"}
    data.update(overrides)
    return GameSystemPayload(**data)


class TestGetGameSystems:
    def test_empty(self, service):
        assert service.get_game_systems() == []

    def test_snapshot_cannot_change_storage(self, service):
        service.create_game_system(_payload())
        service.get_game_systems().clear()
        assert len(service.get_game_systems()) == 1


class TestCreateGameSystem:
    def test_create_then_get(self, service):
        created = service.create_game_system(_payload())
        assert created.id
        assert created.name == "Sega Master System"
        assert service.get_game_system_by_id(created.id) == created

    def test_ids_are_unique(self, service):
        a = service.create_game_system(_payload("A"))
        b = service.create_game_system(_payload("B"))
        assert a.id != b.id

    def test_duplicate_name(self, service):
        service.create_game_system(_payload())
        result = service.create_game_system(_payload())
        assert isinstance(result, ErrorMessage)
        assert result.message == gs_service.GS_SVC_ERR_CREATE_GS_ALREADY_EXISTS_WITH_SAME_NAME
        assert len(service.get_game_systems()) == 1

    def test_name_match_is_case_sensitive(self, service):
        service.create_game_system(_payload("Sega Master System"))
        result = service.create_game_system(_payload("SEGA MASTER SYSTEM"))
        assert not isinstance(result, ErrorMessage)


class TestUpdateGameSystem:
    def test_update(self, service):
        created = service.create_game_system(_payload())
        updated = service.update_game_system(
            created.id, _payload("Master System", description="Renamed", image="new.png")
        )
        assert updated.id == created.id
        assert updated.name == "Master System"
        assert updated.description == "Renamed"
        assert service.get_game_system_by_id(created.id) == updated

    def test_keep_own_name(self, service):
        created = service.create_game_system(_payload())
        updated = service.update_game_system(created.id, _payload(description="Changed"))
        assert not isinstance(updated, ErrorMessage)
        assert updated.description == "Changed"

    def test_not_found(self, service):
        result = service.update_game_system("missing", _payload())
        assert result.message == gs_service.GS_SVC_ERR_UPDATE_GS_NOT_FOUND_BY_ID

    def test_name_taken_by_other(self, service):
        service.create_game_system(_payload("Alpha"))
        beta = service.create_game_system(_payload("Beta"))
        result = service.update_game_system(beta.id, _payload("Alpha"))
        assert result.message == gs_service.GS_SVC_ERR_UPDATE_GS_ALREADY_EXISTS_WITH_SAME_NAME
        assert service.get_game_system_by_id(beta.id).name == "Beta"


class TestDeleteGameSystem:
    def test_delete(self, service):
        created = service.create_game_system(_payload())
        assert service.delete_game_system(created.id) is True
        assert service.get_game_system_by_id(created.id) is None

    def test_not_found(self, service):
        result = service.delete_game_system("missing")
        assert result.message == gs_service.GS_SVC_ERR_DELETE_GS_NOT_FOUND_BY_ID

    def test_get_missing(self, service):
        assert service.get_game_system_by_id("missing") is None


class _SlowLookupRepository(InMemoryRepository):
    """Widens the gap between the name check and the write."""

    def find_by_name(self, name):
        result = super().find_by_name(name)
        time.sleep(0.05)
        return result


def _run_concurrently(*calls):
    results = [None] * len(calls)
    start = threading.Barrier(len(calls))

    def worker(i, call):
        start.wait()
        results[i] = call()

    threads = [threading.Thread(target=worker, args=(i, c)) for i, c in enumerate(calls)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return results


class TestConcurrentWrites:
    def test_concurrent_creates_keep_name_unique(self):
        service = GameSystemService(_SlowLookupRepository())
        results = _run_concurrently(
            lambda: service.create_game_system(_payload("Dup")),
            lambda: service.create_game_system(_payload("Dup")),
        )
        assert [gs.name for gs in service.get_game_systems()] == ["Dup"]
        assert sum(isinstance(r, ErrorMessage) for r in results) == 1

    def test_concurrent_renames_keep_name_unique(self):
        service = GameSystemService(_SlowLookupRepository())
        a = service.create_game_system(_payload("A"))
        b = service.create_game_system(_payload("B"))
        _run_concurrently(
            lambda: service.update_game_system(a.id, _payload("C")),
            lambda: service.update_game_system(b.id, _payload("C")),
        )
        names = sorted(gs.name for gs in service.get_game_systems())
        assert names.count("C") == 1
