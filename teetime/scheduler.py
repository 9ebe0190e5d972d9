"""Fill pass: move groups onto tee boxes that have spare capacity.

Tee boxes are visited in ascending hole order. At each tee box, groups in
that hole's transition queue always go before groups from the waiting
list. Each placement removes one group from a queue, so the pass ends
after at most one iteration per queued group.
"""

from typing import List

from models import CourseState, GolfGroup, GroupStatus
from teetime.logging import get_logger
from teetime.result import ScheduleResult

logger = get_logger(__name__)


def fill_in_place(state: CourseState) -> List[str]:
    """Run the fill pass directly on a working copy. Returns the log lines."""
    logs: List[str] = []
    waiting_list = state.waiting_list

    for hole in state.tee_box_holes():
        tee_box = state.tee_boxes[hole]
        transition_queue = state.transitioning_groups.get(hole, [])

        while len(tee_box) < state.max_groups_per_tee_box:
            if transition_queue:
                group = transition_queue.pop(0)
                prior_hole = group.current_hole if group.current_hole is not None else hole - 1
                group.current_hole = hole
                tee_box.append(group)
                logs.append(
                    f"[Priority Transition] Group {group.name} (from Hole {prior_hole}) "
                    f"enters Tee Box {hole}."
                )
            elif waiting_list:
                group = waiting_list.pop(0)
                _start_round(group, hole)
                tee_box.append(group)
                logs.append(f"[New Tee Off] Group {group.name} enters Tee Box {hole} from the waiting list.")
            else:
                break
            logger.debug(logs[-1])

    return logs


def _start_round(group: GolfGroup, hole: int) -> None:
    group.current_hole = hole
    group.status = GroupStatus.PLAYING
    group.holes_completed = 0
    group.start_hole = hole


def fill_empty_tee_boxes(state: CourseState) -> ScheduleResult:
    """Fill every tee box up to capacity on a copy of ``state``.

    Never fails. With nothing to move, the result holds an equal state and
    no log lines.
    """
    new_state = state.working_copy()
    logs = fill_in_place(new_state)
    if logs:
        logger.info("Fill pass placed %d group(s)", len(logs))
    return ScheduleResult(state=new_state, logs=logs, changed=bool(logs))
