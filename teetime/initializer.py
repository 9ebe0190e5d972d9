"""Build an empty, consistent course state."""

from typing import Dict, List

from models import CompletionRule, CourseState, GolfGroup
from teetime.config import CourseConfig
from teetime.exceptions import InvalidCourseConfigError
from teetime.logging import get_logger

logger = get_logger(__name__)

# (hole, minimum total_holes) for every starting tee box
STARTING_TEES = [
    (1, 1),
    (10, 10),
    (19, 19),   # 27-hole layouts
]


def starting_tee_holes(total_holes: int) -> List[int]:
    """Tee-box holes for a course of the given length, ascending."""
    return [hole for hole, min_holes in STARTING_TEES if total_holes >= min_holes]


def initialize_state(
    total_holes: int = 18,
    max_groups_per_tee_box: int = 3,
    *,
    completion_rule: CompletionRule = CompletionRule.HOLES_COMPLETED,
    round_goal: int = 18,
) -> CourseState:
    """Create an empty course with tee boxes and transition queues in place."""
    try:
        completion_rule = CompletionRule(completion_rule)
    except ValueError as e:
        raise InvalidCourseConfigError(f"Unknown completion rule {completion_rule!r}") from e
    for field_name, value in (
        ("total_holes", total_holes),
        ("max_groups_per_tee_box", max_groups_per_tee_box),
        ("round_goal", round_goal),
    ):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidCourseConfigError(f"{field_name} must be a positive integer, got {value!r}")

    holes = starting_tee_holes(total_holes)
    tee_boxes: Dict[int, List[GolfGroup]] = {hole: [] for hole in holes}
    # Hole 1's queue receives groups looping back from the last hole.
    transitioning_groups: Dict[int, List[GolfGroup]] = {hole: [] for hole in holes}

    state = CourseState(
        total_holes=total_holes,
        max_groups_per_tee_box=max_groups_per_tee_box,
        completion_rule=completion_rule,
        round_goal=round_goal,
        tee_boxes=tee_boxes,
        transitioning_groups=transitioning_groups,
    )
    logger.info(
        "Initialized %d-hole course: tee boxes %s, %d groups per tee box, %s",
        total_holes, holes, max_groups_per_tee_box, completion_rule.value,
    )
    return state


def initialize_from_config(config: CourseConfig) -> CourseState:
    return initialize_state(
        config.total_holes,
        config.max_groups_per_tee_box,
        completion_rule=config.completion_rule,
        round_goal=config.round_goal,
    )
