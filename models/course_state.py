from collections import Counter
from pydantic import Field, model_validator
from typing import Dict, Iterator, List, Optional, Tuple

from .base import BaseTeeModel
from .enums import CompletionRule, GroupStatus
from .group import GolfGroup

# Container labels used by iter_groups() / locate_group()
WAITING_LIST = "waiting_list"
TEE_BOX = "tee_box"
TRANSITION = "transition"
ON_COURSE = "on_course"


class CourseState(BaseTeeModel):
    """Full snapshot of one course: configuration plus every live group.

    A group is held by exactly one container at a time. Finished groups
    are dropped from the snapshot entirely.
    """
    total_holes: int = Field(18, ge=1)
    max_groups_per_tee_box: int = Field(3, ge=1)
    completion_rule: CompletionRule = CompletionRule.HOLES_COMPLETED
    round_goal: int = Field(18, ge=1)

    waiting_list: List[GolfGroup] = Field(default_factory=list)
    tee_boxes: Dict[int, List[GolfGroup]] = Field(default_factory=dict)
    transitioning_groups: Dict[int, List[GolfGroup]] = Field(default_factory=dict)
    groups_on_course: Dict[str, GolfGroup] = Field(default_factory=dict)

    next_group_number: int = Field(1, ge=1)

    @model_validator(mode='after')
    def validate_invariants(self):
        violations = self.invariant_violations()
        if violations:
            raise ValueError("; ".join(violations))
        return self

    # ================================================================
    # Lookups
    # ================================================================

    def tee_box_holes(self) -> List[int]:
        """Tee-box holes in ascending order. Fill order depends on this."""
        return sorted(self.tee_boxes)

    def has_tee_box(self, hole: int) -> bool:
        return hole in self.tee_boxes

    def iter_groups(self) -> Iterator[Tuple[str, Optional[int], GolfGroup]]:
        """Yield (container, hole, group) for every group held by the state."""
        for group in self.waiting_list:
            yield WAITING_LIST, None, group
        for hole in self.tee_box_holes():
            for group in self.tee_boxes[hole]:
                yield TEE_BOX, hole, group
        for hole in sorted(self.transitioning_groups):
            for group in self.transitioning_groups[hole]:
                yield TRANSITION, hole, group
        for group in self.groups_on_course.values():
            yield ON_COURSE, group.current_hole, group

    def locate_group(self, group_id: str) -> Optional[Tuple[str, Optional[int]]]:
        """Return (container, hole) holding the group, or None if absent."""
        for container, hole, group in self.iter_groups():
            if group.id == group_id:
                return container, hole
        return None

    def group_ids(self) -> List[str]:
        return [group.id for _, _, group in self.iter_groups()]

    # ================================================================
    # Invariants
    # ================================================================

    def invariant_violations(self) -> List[str]:
        """Describe every broken invariant. Empty list means the state is consistent."""
        problems: List[str] = []

        duplicates = [gid for gid, n in Counter(self.group_ids()).items() if n > 1]
        if duplicates:
            problems.append(f"Group ids held more than once: {sorted(duplicates)}")

        for hole, queue in self.tee_boxes.items():
            if not 1 <= hole <= self.total_holes:
                problems.append(f"Tee box {hole} outside holes 1-{self.total_holes}")
            if len(queue) > self.max_groups_per_tee_box:
                problems.append(
                    f"Tee box {hole} holds {len(queue)} groups "
                    f"(max {self.max_groups_per_tee_box})"
                )

        for hole in self.transitioning_groups:
            if hole not in self.tee_boxes:
                problems.append(f"Transition queue {hole} has no matching tee box")

        for container, hole, group in self.iter_groups():
            if group.status == GroupStatus.FINISHED:
                problems.append(f"Finished group {group.id} still held in {container}")
            elif container == WAITING_LIST and group.status != GroupStatus.WAITING:
                problems.append(f"Group {group.id} on the waiting list is {group.status.value}")
            elif container == ON_COURSE and group.status != GroupStatus.PLAYING:
                problems.append(f"Group {group.id} on the course is {group.status.value}")
            if container == TEE_BOX and group.current_hole != hole:
                problems.append(f"Group {group.id} in tee box {hole} is at hole {group.current_hole}")
            if container == ON_COURSE and group.current_hole is None:
                problems.append(f"Group {group.id} on the course has no current hole")

        for key, group in self.groups_on_course.items():
            if key != group.id:
                problems.append(f"On-course key {key} does not match group id {group.id}")

        return problems

    # ================================================================
    # Serialization
    # ================================================================

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str) -> "CourseState":
        return cls.model_validate_json(data)
