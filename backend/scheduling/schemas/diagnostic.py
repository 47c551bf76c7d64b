from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Diagnostic(BaseModel):
    kind: Literal["error", "warning"]
    message: str
    severity: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


def is_blocked(diagnostics: list[Diagnostic]) -> bool:
    return any(item.is_error for item in diagnostics)
