import json
from pydantic import Field
from typing import Any, Dict, List

from models import BaseTeeModel, CourseState


class ScheduleResult(BaseTeeModel):
    """New course state plus the ordered decisions that produced it.

    ``changed`` is False when nothing moved. Blocked commands return the
    caller's original snapshot as ``state``.
    """
    state: CourseState
    logs: List[str] = Field(default_factory=list)
    changed: bool = True

    def then(self, other: "ScheduleResult") -> "ScheduleResult":
        """Chain a follow-up result: keep its state, concatenate logs."""
        return ScheduleResult(state=other.state, logs=self.logs + other.logs, changed=True)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready payload for a host response."""
        return {"state": json.loads(self.state.to_json()), "logs": list(self.logs)}
