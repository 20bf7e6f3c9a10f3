from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


ROOT_DIR = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DINNERAPP_")

    env: Env = Env.local
    html_dir: Path = ROOT_DIR / "assets/html"
    assets_dir: Path = ROOT_DIR / "assets"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
