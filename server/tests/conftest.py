import pytest
from fastapi.testclient import TestClient

from catalog.config import settings


@pytest.fixture(autouse=True)
def tmp_seed_dir(tmp_path):
    """Point seed loading at an empty temporary directory during tests."""
    original = settings.seed_dir
    settings.seed_dir = tmp_path / "seed"
    settings.seed_dir.mkdir()
    yield settings.seed_dir
    settings.seed_dir = original


@pytest.fixture()
def app():
    from catalog.main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def gamesystem_service(app):
    return app.state.gamesystem_service


@pytest.fixture()
def videogame_service(app):
    return app.state.videogame_service


@pytest.fixture()
def master_system():
    return {
        "name": "Sega Master System",
        "description": "A Sega 8 bits console",
        "image": "mastersystem.png",
    }


@pytest.fixture()
def chrono_trigger():
    return {
        "name": "Chrono Trigger",
        "developer": "Square",
        "gamesystem": "Nintendo Super NES",
        "genre": "Rol",
        "year": 1995,
        "image": "chronotrigger.png",
    }
