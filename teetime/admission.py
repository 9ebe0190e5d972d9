"""Admit new groups to the tail of the waiting list.

Admission never schedules. Callers run the fill pass afterward to place
groups on open tee boxes.
"""

from pydantic import ValidationError
from typing import Iterable, List, Tuple

from models import CourseState, GolfGroup, GroupStatus
from teetime.exceptions import DuplicateGroupError, InvalidGroupError
from teetime.logging import get_logger

logger = get_logger(__name__)

GROUP_ID_PREFIX = "G"


def build_group(group_id: str, name: str, players: int = 4) -> GolfGroup:
    """A fresh WAITING group with no hole assigned.

    Raises InvalidGroupError for a blank name or a party of fewer than one.
    """
    try:
        return GolfGroup(id=group_id, name=name, players=players)
    except ValidationError as e:
        raise InvalidGroupError(f"Group {name!r} rejected: {e.errors()[0]['msg']}") from e


def add_groups_to_waiting_list(state: CourseState, groups: Iterable[GolfGroup]) -> CourseState:
    """Return a copy of ``state`` with ``groups`` appended to the waiting list.

    Raises DuplicateGroupError if any id is already held by the state or
    repeats within ``groups``; the input state is untouched either way.
    """
    new_state = state.working_copy()
    taken = set(new_state.group_ids())
    for group in groups:
        if group.id in taken:
            raise DuplicateGroupError(f"Group {group.id} is already on the course state")
        taken.add(group.id)
        admitted = group.working_copy()
        admitted.status = GroupStatus.WAITING
        admitted.current_hole = None
        new_state.waiting_list.append(admitted)
        logger.debug("Group %s (%s) joined the waiting list", admitted.name, admitted.id)
    return new_state


def allocate_group_ids(state: CourseState, count: int) -> Tuple[List[str], int]:
    """Next ``count`` generated ids not already in use, plus the advanced counter."""
    taken = set(state.group_ids())
    number = state.next_group_number
    ids: List[str] = []
    while len(ids) < count:
        candidate = f"{GROUP_ID_PREFIX}{number}"
        number += 1
        if candidate not in taken:
            ids.append(candidate)
    return ids, number


def admit_groups(state: CourseState, entries: Iterable[Tuple[str, int]]) -> Tuple[CourseState, List[GolfGroup]]:
    """Create groups from (name, players) pairs with generated ids and admit them.

    Returns the new state and the admitted groups in waiting-list order.
    """
    entries = list(entries)
    ids, next_number = allocate_group_ids(state, len(entries))
    groups = [build_group(gid, name, players) for gid, (name, players) in zip(ids, entries)]
    new_state = add_groups_to_waiting_list(state, groups)
    new_state.next_group_number = next_number
    logger.info("Admitted %d group(s) to the waiting list: %s", len(groups), ids)
    return new_state, groups
