"""Finish-hole: advance an on-course group by exactly one hole.

After the counter is bumped the group either completes its round, walks to
the next ordinary hole, or (when the next hole is a tee box) joins that
hole's transition queue. Finishing the last hole of an 18- or 27-hole
layout loops the group back to tee box 1.
"""

from typing import List

from models import CompletionRule, CourseState, GolfGroup, GroupStatus
from teetime.logging import get_logger
from teetime.result import ScheduleResult
from teetime.scheduler import fill_in_place

logger = get_logger(__name__)

FIRST_HOLE = 1
EIGHTEEN_HOLE_END = 19      # next hole after finishing 18
TWENTY_SEVEN_HOLE_END = 28  # next hole after finishing 27


def round_complete(state: CourseState, group: GolfGroup, next_hole: int) -> bool:
    """Apply the state's completion rule after the counter has been bumped."""
    if state.completion_rule == CompletionRule.LAST_HOLE:
        return next_hole > state.total_holes
    return group.holes_completed >= state.round_goal


def resolve_loop_back(state: CourseState, next_hole: int) -> int:
    """Map the hole past the end of a loop back to hole 1 when tee box 1 exists.

    On courses longer than 18 holes, 19 is a real tee box and is left alone.
    Any other hole past the end of the course (a 9-hole loop) also returns
    to hole 1.
    """
    if not state.has_tee_box(FIRST_HOLE):
        return next_hole
    if next_hole == TWENTY_SEVEN_HOLE_END and state.total_holes >= 27:
        return FIRST_HOLE
    if next_hole == EIGHTEEN_HOLE_END and state.total_holes <= 18:
        return FIRST_HOLE
    if next_hole > state.total_holes:
        return FIRST_HOLE
    return next_hole


def _completion_message(state: CourseState, group: GolfGroup) -> str:
    if state.completion_rule == CompletionRule.LAST_HOLE:
        return f"[Finished] Group {group.name} completes the final hole {group.current_hole}."
    return f"[Finished] Group {group.name} completes the required {state.round_goal} holes."


def finish_hole(state: CourseState, group_id: str) -> ScheduleResult:
    """Record that an on-course group finished its current hole, then refill.

    A group that is not on the course is reported and the original state is
    returned unchanged.
    """
    if group_id not in state.groups_on_course:
        message = f"[Move Error] Group with ID {group_id} not found on the course."
        logger.warning(message)
        return ScheduleResult(state=state, logs=[message], changed=False)

    new_state = state.working_copy()
    group = new_state.groups_on_course[group_id]
    logs: List[str] = []

    group.holes_completed += 1
    next_hole = group.current_hole + 1

    if round_complete(new_state, group, next_hole):
        del new_state.groups_on_course[group_id]
        group.status = GroupStatus.FINISHED
        logs.append(_completion_message(new_state, group))
        logger.info(logs[-1])
        # The group has left the course; no vacancy was created.
        return ScheduleResult(state=new_state, logs=logs)

    logs.append(f"Group {group.name} finished hole {group.current_hole}, moving to hole {next_hole}.")

    looped = resolve_loop_back(new_state, next_hole)
    if looped != next_hole:
        logs.append(f"[Loop] Group {group.name} finished Hole {group.current_hole} and loops to Tee Box {looped}.")
        next_hole = looped

    if new_state.has_tee_box(next_hole):
        del new_state.groups_on_course[group_id]
        new_state.transitioning_groups.setdefault(next_hole, []).append(group)
        logs.append(f"[Transition] Group {group.name} is now waiting for Tee Box {next_hole}.")
    else:
        group.current_hole = next_hole

    for line in logs:
        logger.debug(line)
    logs.extend(fill_in_place(new_state))
    return ScheduleResult(state=new_state, logs=logs)
