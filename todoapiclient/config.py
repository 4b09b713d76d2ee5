from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    todo_api_endpoint: str = "https://jsonplaceholder.typicode.com"
    log_level: str = "INFO"
    json_logs: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
