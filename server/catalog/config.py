from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 10010
    log_level: str = "INFO"
    load_seed_data: bool = True
    seed_dir: Path = Path(__file__).parent.parent / "data"

    model_config = {"env_prefix": "CATALOG_"}


settings = Settings()
