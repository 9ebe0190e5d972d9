"""Tee-off: send the group at the front of a tee box onto the course."""

from typing import Optional, Tuple

from models import CourseState, GolfGroup
from teetime.logging import get_logger
from teetime.result import ScheduleResult
from teetime.scheduler import fill_in_place

logger = get_logger(__name__)


def _pop_front(state: CourseState, group_id: str) -> Optional[Tuple[int, GolfGroup]]:
    """Remove the group if it is first in some tee box. Only the front may leave."""
    for hole in state.tee_box_holes():
        tee_box = state.tee_boxes[hole]
        if tee_box and tee_box[0].id == group_id:
            return hole, tee_box.pop(0)
    return None


def tee_off_group(state: CourseState, group_id: str) -> ScheduleResult:
    """Move the front group of its tee box onto the course, then refill.

    A group that is missing or not at the front is blocked: the original
    state comes back unchanged with one explanatory log line.
    """
    new_state = state.working_copy()
    popped = _pop_front(new_state, group_id)

    if popped is None:
        message = f"[Tee Off Blocked] Group with ID {group_id} is not at the front of any tee box."
        logger.warning(message)
        return ScheduleResult(state=state, logs=[message], changed=False)

    hole, group = popped
    new_state.groups_on_course[group.id] = group
    logs = [f"[Tee Off] Group {group.name} starts playing from Tee Box {hole}."]
    logger.info(logs[0])

    logs.extend(fill_in_place(new_state))
    return ScheduleResult(state=new_state, logs=logs)
