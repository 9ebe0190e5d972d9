"""Course settings for initializing a tee time state."""

import os
from pydantic import BaseModel, ConfigDict, Field, field_validator

from models import CompletionRule


class CourseConfig(BaseModel):
    """Validated course settings. Hosts usually build this once at startup."""
    model_config = ConfigDict(validate_assignment=True)

    total_holes: int = Field(18, ge=1)
    max_groups_per_tee_box: int = Field(3, ge=1)
    completion_rule: CompletionRule = CompletionRule.HOLES_COMPLETED
    round_goal: int = Field(18, ge=1)
    log_level: str = "INFO"

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @classmethod
    def from_env(cls) -> "CourseConfig":
        """Build settings from TEETIME_* environment variables, falling back to defaults."""
        return cls(
            total_holes=int(os.getenv("TEETIME_TOTAL_HOLES", "18")),
            max_groups_per_tee_box=int(os.getenv("TEETIME_MAX_GROUPS_PER_TEE_BOX", "3")),
            completion_rule=os.getenv("TEETIME_COMPLETION_RULE", CompletionRule.HOLES_COMPLETED.value),
            round_goal=int(os.getenv("TEETIME_ROUND_GOAL", "18")),
            log_level=os.getenv("TEETIME_LOG_LEVEL", "INFO"),
        )
