from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from scheduling.schemas.course import Cohort


class CohortBreakdown(BaseModel):
    scheduled: int = Field(ge=0)
    total: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class ScheduleStats(BaseModel):
    total_courses: int = Field(ge=0)
    scheduled: int = Field(ge=0)
    unscheduled: int = Field(ge=0)
    conflicts: int = Field(ge=0)
    efficiency: float = Field(ge=0.0, le=1.0)
    by_cohort: dict[Cohort, CohortBreakdown] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def efficiency_percent(self) -> int:
        return round(self.efficiency * 100)
