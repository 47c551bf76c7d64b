from functools import lru_cache
import json
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


BACKEND_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

DEFAULT_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
DEFAULT_TIME_SLOTS = [
    "8:00-9:00",
    "9:00-10:00",
    "10:00-11:00",
    "11:00-12:00",
    "12:00-13:00",
    "13:00-14:00",
    "14:00-15:00",
    "15:00-16:00",
    "16:00-17:00",
    "17:00-18:00",
]
DEFAULT_RESOURCE_VOCABULARY = [
    "Projector",
    "Whiteboard",
    "Computer Lab",
    "Science Lab",
    "Audio System",
    "Video Equipment",
    "Smart Board",
    "WiFi",
    "Air Conditioning",
    "Microphone",
    "Recording Equipment",
]


def split_list_value(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                parsed = json.loads(stripped)
                if isinstance(parsed, list):
                    return [str(item).strip() for item in parsed if str(item).strip()]
            except json.JSONDecodeError:
                pass
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class Settings(BaseSettings):
    # Resolve to backend/.env so the engine picks up the same file from any cwd.
    model_config = SettingsConfigDict(
        env_file=str(BACKEND_ENV_FILE),
        env_file_encoding="utf-8",
        env_prefix="SCHEDULER_",
        extra="ignore",
    )

    project_name: str = "Class Schedule Optimizer"

    days: Annotated[list[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_DAYS))
    time_slots: Annotated[list[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_TIME_SLOTS))
    resource_vocabulary: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_RESOURCE_VOCABULARY)
    )

    max_attempts_per_course: int = Field(default=10, ge=1, le=1000)
    selection_strategy: Literal["random", "first"] = "random"
    random_seed: int | None = Field(default=None, ge=0, le=2_000_000_000)
    conflict_mode: Literal["symmetric", "sequential"] = "symmetric"

    @field_validator("days", "time_slots", "resource_vocabulary", mode="before")
    @classmethod
    def split_list_fields(cls, value: str | list[str]) -> list[str]:
        return split_list_value(value)


@lru_cache
def get_settings() -> Settings:
    return Settings()
