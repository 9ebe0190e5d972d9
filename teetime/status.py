"""Read-only summary of a course state for dashboards and host responses."""

from pydantic import BaseModel
from typing import List, Optional

from models import CourseState


class TeeBoxSummary(BaseModel):
    """Occupancy of one tee box, front of the queue first."""
    hole: int
    capacity: int
    occupancy: int
    group_names: List[str]
    queued_transitions: int = 0

    @property
    def open_slots(self) -> int:
        return self.capacity - self.occupancy


class OnCourseSummary(BaseModel):
    id: str
    name: str
    current_hole: Optional[int] = None
    holes_completed: int = 0


class CourseStatus(BaseModel):
    """Aggregated view of where every live group is."""
    total_holes: int
    waiting_count: int
    waiting_names: List[str]
    tee_boxes: List[TeeBoxSummary]
    on_course: List[OnCourseSummary]

    @property
    def transitioning_count(self) -> int:
        return sum(tb.queued_transitions for tb in self.tee_boxes)

    @property
    def is_idle(self) -> bool:
        """Nothing waiting, queued, or playing."""
        return (
            self.waiting_count == 0
            and not self.on_course
            and all(tb.occupancy == 0 for tb in self.tee_boxes)
            and self.transitioning_count == 0
        )


def summarize_state(state: CourseState) -> CourseStatus:
    """Project a full CourseState into a CourseStatus."""
    tee_boxes = [
        TeeBoxSummary(
            hole=hole,
            capacity=state.max_groups_per_tee_box,
            occupancy=len(state.tee_boxes[hole]),
            group_names=[g.name for g in state.tee_boxes[hole]],
            queued_transitions=len(state.transitioning_groups.get(hole, [])),
        )
        for hole in state.tee_box_holes()
    ]
    on_course = [
        OnCourseSummary(
            id=g.id,
            name=g.name,
            current_hole=g.current_hole,
            holes_completed=g.holes_completed,
        )
        for g in sorted(state.groups_on_course.values(), key=lambda g: g.current_hole or 0)
    ]
    return CourseStatus(
        total_holes=state.total_holes,
        waiting_count=len(state.waiting_list),
        waiting_names=[g.name for g in state.waiting_list],
        tee_boxes=tee_boxes,
        on_course=on_course,
    )
