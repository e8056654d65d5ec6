from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Vault settings
    notes_dir: Path = Path("data/notes")
    exclude_folders: list[str] = [".obsidian", ".trash"]

    # Index settings
    local_index_path: str = "data/index.json"

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
