from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from scheduling.core.config import Settings
from scheduling.core.exceptions import ConfigurationError


def _normalize_labels(values: list[str], label: str) -> list[str]:
    cleaned = [item.strip() for item in values if item and item.strip()]
    seen: set[str] = set()
    duplicates: list[str] = []
    for item in cleaned:
        if item in seen:
            duplicates.append(item)
        seen.add(item)
    if duplicates:
        raise ValueError(f"Duplicate {label} value(s): {', '.join(duplicates)}")
    return cleaned


def normalize_availability(value: dict[str, list[str]]) -> dict[str, list[str]]:
    """Strip day keys and slot labels, rejecting a slot listed twice for one day."""
    normalized: dict[str, list[str]] = {}
    for day, slots in value.items():
        day_key = str(day).strip()
        if not day_key:
            raise ValueError("Availability day names cannot be blank")
        if day_key in normalized:
            raise ValueError(f"Availability lists day {day_key} more than once")
        normalized[day_key] = _normalize_labels(list(slots), f"time slot for {day_key}")
    return normalized


class Calendar(BaseModel):
    """The weekly grid every availability map and slot comparison is drawn from."""

    days: tuple[str, ...] = Field(min_length=1)
    time_slots: tuple[str, ...] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("days")
    @classmethod
    def validate_days(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(_normalize_labels(list(value), "day"))

    @field_validator("time_slots")
    @classmethod
    def validate_time_slots(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(_normalize_labels(list(value), "time slot"))

    @classmethod
    def build(cls, days: list[str] | tuple[str, ...], time_slots: list[str] | tuple[str, ...]) -> "Calendar":
        try:
            return cls(days=tuple(days), time_slots=tuple(time_slots))
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid scheduling calendar",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    @classmethod
    def from_settings(cls, settings: Settings) -> "Calendar":
        return cls.build(settings.days, settings.time_slots)

    @property
    def slot_count(self) -> int:
        return len(self.days) * len(self.time_slots)

    def has_slot(self, day: str, time_slot: str) -> bool:
        return day in self.days and time_slot in self.time_slots
