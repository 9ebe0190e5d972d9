from pydantic import Field, field_validator
from typing import Optional

from .base import BaseTeeModel
from .enums import GroupStatus


class GolfGroup(BaseTeeModel):
    """A party of players moving through the course together."""
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    players: int = Field(4, ge=1)
    current_hole: Optional[int] = Field(None, ge=1)
    status: GroupStatus = GroupStatus.WAITING
    holes_completed: int = Field(0, ge=0)
    start_hole: Optional[int] = Field(None, ge=1)

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Group name cannot be blank")
        return v

    @property
    def is_waiting(self) -> bool:
        return self.status == GroupStatus.WAITING

    @property
    def is_finished(self) -> bool:
        return self.status == GroupStatus.FINISHED
